"""DWARF (version 2 to 4) constant encodings as integer enumerations.

Members whose natural name is a Python reserved word or clashes with a
builtin carry a trailing underscore.
"""

from enum import IntEnum

__all__ = [
    "DW_TAG",
    "DW_CHILDREN",
    "DW_AT",
    "DW_FORM",
    "DW_OP",
    "DW_ATE",
    "DW_DS",
    "DW_END",
    "DW_ACCESS",
    "DW_VIS",
    "DW_VIRTUALITY",
    "DW_LANG",
    "DW_ID",
    "DW_CC",
    "DW_INL",
    "DW_ORD",
    "DW_DSC",
    "DW_LNS",
    "DW_LNE",
]


class DW_TAG(IntEnum):
    """DIE tags."""

    array_type = 0x01
    class_type = 0x02
    entry_point = 0x03
    enumeration_type = 0x04
    formal_parameter = 0x05
    imported_declaration = 0x08
    label = 0x0A
    lexical_block = 0x0B
    member = 0x0D
    pointer_type = 0x0F
    reference_type = 0x10
    compile_unit = 0x11
    string_type = 0x12
    structure_type = 0x13
    subroutine_type = 0x15
    typedef_ = 0x16

    union_type = 0x17
    unspecified_parameters = 0x18
    variant = 0x19
    common_block = 0x1A
    common_inclusion = 0x1B
    inheritance = 0x1C
    inlined_subroutine = 0x1D
    module = 0x1E
    ptr_to_member_type = 0x1F
    set_type = 0x20
    subrange_type = 0x21
    with_stmt = 0x22
    access_declaration = 0x23
    base_type = 0x24
    catch_block = 0x25
    const_type = 0x26
    constant = 0x27
    enumerator = 0x28
    file_type = 0x29
    friend_ = 0x2A

    namelist = 0x2B
    namelist_item = 0x2C
    packed_type = 0x2D
    subprogram = 0x2E
    template_type_parameter = 0x2F
    template_value_parameter = 0x30
    thrown_type = 0x31
    try_block = 0x32
    variant_part = 0x33
    variable = 0x34
    volatile_type = 0x35
    dwarf_procedure = 0x36
    restrict_type = 0x37
    interface_type = 0x38
    namespace_ = 0x39
    imported_module = 0x3A
    unspecified_type = 0x3B
    partial_unit = 0x3C
    imported_unit = 0x3D
    condition = 0x3F

    shared_type = 0x40
    type_unit = 0x41
    rvalue_reference_type = 0x42
    template_alias = 0x43
    lo_user = 0x4080
    hi_user = 0xFFFF


class DW_CHILDREN(IntEnum):
    """Whether a DIE abbreviation has children."""

    no = 0x00
    yes = 0x01


class DW_AT(IntEnum):
    """Attribute names."""

    sibling = 0x01
    location = 0x02
    name = 0x03
    ordering = 0x09
    byte_size = 0x0B
    bit_offset = 0x0C
    bit_size = 0x0D
    stmt_list = 0x10
    low_pc = 0x11
    high_pc = 0x12
    language = 0x13
    discr = 0x15
    discr_value = 0x16
    visibility = 0x17
    import_ = 0x18
    string_length = 0x19
    common_reference = 0x1A
    comp_dir = 0x1B
    const_value = 0x1C

    containing_type = 0x1D
    default_value = 0x1E
    inline_ = 0x20
    is_optional = 0x21
    lower_bound = 0x22
    producer = 0x25
    prototyped = 0x27
    return_addr = 0x2A
    start_scope = 0x2C
    bit_stride = 0x2E
    upper_bound = 0x2F
    abstract_origin = 0x31
    accessibility = 0x32
    address_class = 0x33
    artificial = 0x34
    base_types = 0x35
    calling_convention = 0x36
    count = 0x37
    data_member_location = 0x38
    decl_column = 0x39

    decl_file = 0x3A
    decl_line = 0x3B
    declaration = 0x3C
    discr_list = 0x3D
    encoding = 0x3E
    external = 0x3F
    frame_base = 0x40
    friend_ = 0x41
    identifier_case = 0x42
    macro_info = 0x43
    namelist_item = 0x44
    priority = 0x45
    segment = 0x46
    specification = 0x47
    static_link = 0x48
    type = 0x49
    use_location = 0x4A
    variable_parameter = 0x4B
    virtuality = 0x4C
    vtable_elem_location = 0x4D

    # DWARF 3
    allocated = 0x4E
    associated = 0x4F
    data_location = 0x50
    byte_stride = 0x51
    entry_pc = 0x52
    use_UTF8 = 0x53
    extension = 0x54
    ranges = 0x55
    trampoline = 0x56
    call_column = 0x57
    call_file = 0x58
    call_line = 0x59
    description = 0x5A
    binary_scale = 0x5B
    decimal_scale = 0x5C
    small = 0x5D
    decimal_sign = 0x5E
    digit_count = 0x5F
    picture_string = 0x60
    mutable_ = 0x61

    threads_scaled = 0x62
    explicit_ = 0x63
    object_pointer = 0x64
    endianity = 0x65
    elemental = 0x66
    pure = 0x67
    recursive = 0x68

    # DWARF 4
    signature = 0x69
    main_subprogram = 0x6A
    data_bit_offset = 0x6B
    const_expr = 0x6C
    enum_class = 0x6D
    linkage_name = 0x6E

    lo_user = 0x2000
    hi_user = 0x3FFF


class DW_FORM(IntEnum):
    """Attribute form encodings."""

    addr = 0x01
    block2 = 0x03
    block4 = 0x04
    data2 = 0x05
    data4 = 0x06
    data8 = 0x07
    string = 0x08
    block = 0x09
    block1 = 0x0A
    data1 = 0x0B
    flag = 0x0C
    sdata = 0x0D
    strp = 0x0E
    udata = 0x0F
    ref_addr = 0x10
    ref1 = 0x11
    ref2 = 0x12
    ref4 = 0x13
    ref8 = 0x14

    ref_udata = 0x15
    indirect = 0x16

    # DWARF 4
    sec_offset = 0x17
    exprloc = 0x18
    flag_present = 0x19
    ref_sig8 = 0x20


class DW_OP(IntEnum):
    """Location expression operation encodings."""

    addr = 0x03
    deref = 0x06

    const1u = 0x08
    const1s = 0x09
    const2u = 0x0A
    const2s = 0x0B
    const4u = 0x0C
    const4s = 0x0D
    const8u = 0x0E
    const8s = 0x0F
    constu = 0x10
    consts = 0x11
    dup = 0x12
    drop = 0x13
    over = 0x14
    pick = 0x15
    swap = 0x16
    rot = 0x17
    xderef = 0x18
    abs = 0x19
    and_ = 0x1A
    div = 0x1B

    minus = 0x1C
    mod = 0x1D
    mul = 0x1E
    neg = 0x1F
    not_ = 0x20
    or_ = 0x21
    plus = 0x22
    plus_uconst = 0x23
    shl = 0x24
    shr = 0x25
    shra = 0x26
    xor_ = 0x27
    skip = 0x2F
    bra = 0x28
    eq = 0x29
    ge = 0x2A
    gt = 0x2B
    le = 0x2C
    lt = 0x2D
    ne = 0x2E

    # Literals 0..31 are lit0 + literal
    lit0 = 0x30
    lit31 = 0x4F

    # Registers 0..31 are reg0 + regnum
    reg0 = 0x50
    reg31 = 0x6F

    # Base registers 0..31 are breg0 + regnum
    breg0 = 0x70
    breg31 = 0x8F

    regx = 0x90
    fbreg = 0x91
    bregx = 0x92
    piece = 0x93
    deref_size = 0x94
    xderef_size = 0x95
    nop = 0x96

    # DWARF 3
    push_object_address = 0x97
    call2 = 0x98
    call4 = 0x99
    call_ref = 0x9A
    form_tls_address = 0x9B
    call_frame_cfa = 0x9C
    bit_piece = 0x9D

    # DWARF 4
    implicit_value = 0x9E
    stack_value = 0x9F

    lo_user = 0xE0
    hi_user = 0xFF


class DW_ATE(IntEnum):
    """Base type encodings."""

    address = 0x01
    boolean = 0x02
    complex_float = 0x03
    float_ = 0x04
    signed_ = 0x05
    signed_char = 0x06
    unsigned_ = 0x07
    unsigned_char = 0x08
    imaginary_float = 0x09
    packed_decimal = 0x0A
    numeric_string = 0x0B
    edited = 0x0C
    signed_fixed = 0x0D
    unsigned_fixed = 0x0E
    decimal_float = 0x0F

    # DWARF 4
    UTF = 0x10

    lo_user = 0x80
    hi_user = 0xFF


class DW_DS(IntEnum):
    """Decimal sign encodings."""

    unsigned_ = 0x01
    leading_overpunch = 0x02
    trailing_overpunch = 0x03
    leading_separate = 0x04
    trailing_separate = 0x05


class DW_END(IntEnum):
    """Endianity encodings."""

    default_ = 0x00
    big = 0x01
    little = 0x02
    lo_user = 0x40
    hi_user = 0xFF


class DW_ACCESS(IntEnum):
    """Accessibility codes."""

    public_ = 0x01
    protected_ = 0x02
    private_ = 0x03


class DW_VIS(IntEnum):
    """Visibility codes."""

    local = 0x01
    exported = 0x02
    qualified = 0x03


class DW_VIRTUALITY(IntEnum):
    """Virtuality codes."""

    none = 0x00
    virtual_ = 0x01
    pure_virtual = 0x02


class DW_LANG(IntEnum):
    """Source language codes."""

    C89 = 0x0001
    C = 0x0002
    Ada83 = 0x0003
    C_plus_plus = 0x0004
    Cobol74 = 0x0005
    Cobol85 = 0x0006
    Fortran77 = 0x0007
    Fortran90 = 0x0008
    Pascal83 = 0x0009
    Modula2 = 0x000A
    Java = 0x000B
    C99 = 0x000C
    Ada95 = 0x000D
    Fortran95 = 0x000E
    PLI = 0x000F

    ObjC = 0x0010
    ObjC_plus_plus = 0x0011
    UPC = 0x0012
    D = 0x0013
    Python = 0x0014
    lo_user = 0x8000
    hi_user = 0xFFFF


class DW_ID(IntEnum):
    """Identifier case codes."""

    case_sensitive = 0x00
    up_case = 0x01
    down_case = 0x02
    case_insensitive = 0x03


class DW_CC(IntEnum):
    """Calling convention codes."""

    normal = 0x01
    program = 0x02
    nocall = 0x03
    lo_user = 0x40
    hi_user = 0xFF


class DW_INL(IntEnum):
    """Inline codes."""

    not_inlined = 0x00
    inlined = 0x01
    declared_not_inlined = 0x02
    declared_inlined = 0x03


class DW_ORD(IntEnum):
    """Array ordering codes."""

    row_major = 0x00
    col_major = 0x01


class DW_DSC(IntEnum):
    """Discriminant descriptor codes."""

    label = 0x00
    range = 0x01


class DW_LNS(IntEnum):
    """Line number program standard opcodes."""

    copy = 0x01
    advance_pc = 0x02
    advance_line = 0x03
    set_file = 0x04
    set_column = 0x05
    negate_stmt = 0x06
    set_basic_block = 0x07
    const_add_pc = 0x08
    fixed_advance_pc = 0x09

    # DWARF 3
    set_prologue_end = 0x0A
    set_epilogue_begin = 0x0B
    set_isa = 0x0C


class DW_LNE(IntEnum):
    """Line number program extended opcodes."""

    end_sequence = 0x01
    set_address = 0x02
    define_file = 0x03

    # DWARF 4
    set_discriminator = 0x04

    lo_user = 0x80
    hi_user = 0xFF