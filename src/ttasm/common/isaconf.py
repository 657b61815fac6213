# Encoded units
BYTE_SIZE = 1
WORD_SIZE = 2
BYTE_MASK = 0xFF

# Listing lines
GROUP_SIZE = 4
GROUP_DIGITS = GROUP_SIZE * 2
GROUP_PAD = 0x00

# Word layout
OPCODE_SHIFT = 8
HIGH_BYTE_BIT = 0x0100    # Constant/ExternalData: operand in the high half
EXT_DATA_BIT = 0x0200     # ExternalData source
STACK_BASE_BIT = 0x0200   # Memory source relative to SP
MEMORY_BIT = 0x0400       # Memory source
INDIRECT_BIT = 0x0100     # Memory source, one level of dereference

# Relative branch target
TARGET_BITS = 11
TARGET_MASK = (1 << TARGET_BITS) - 1
TARGET_MIN = -(1 << (TARGET_BITS - 1))
TARGET_MAX = (1 << (TARGET_BITS - 1)) - 1

CONDITION_MASK = 0x0003
