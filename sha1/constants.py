# Initial hash values (big-endian words)
H0 = 0x67452301
H1 = 0xEFCDAB89
H2 = 0x98BADCFE
H3 = 0x10325476
H4 = 0xC3D2E1F0

INITIAL_STATE = (H0, H1, H2, H3, H4)

# Round constants, one per 20-round quarter
K0 = 0x5A827999
K1 = 0x6ED9EBA1
K2 = 0x8F1BBCDC
K3 = 0xCA62C1D6

BLOCK_SIZE = 64
LENGTH_FIELD_SIZE = 8
SCHEDULE_LENGTH = 80
ROUNDS = 80

WORD_MASK = 0xFFFFFFFF
MAX_MESSAGE_BITS = 2 ** 64 - 1
