# Fixed-function (single byte)
NOP = 0x00
HLT = 0x01  # stop the core
PSH = 0x04  # A -> [SP++]
POP = 0x05  # [--SP] -> A
NOT = 0x07  # ~A -> A
OUTL = 0x08  # A[7:0] -> out port
SDP = 0x0A  # A -> DP
LDI = 0x44  # M[A] -> A

# Operand-bearing (high byte of a word)
LD = 0x80   # S -> A
ST = 0x90   # A -> S
ADD = 0x88  # A +  S -> A
SUB = 0x98  # A -  S -> A
AND = 0xA0  # A &  S -> A
OR = 0xA8   # A |  S -> A
XOR = 0xB0  # A ^  S -> A

# Control (high byte of a word)
BR = 0xC0   # IP + T -> IP
IF = 0xF0   # gate the next BR on C

FIXED = (NOP, HLT, PSH, POP, NOT, OUTL, SDP, LDI)
UNARY = (LD, ST, ADD, SUB, AND, OR, XOR)
