# Generated by belnapian-tablegen. Do not edit by hand.
"""Precomputed operation tables for the 15-valued extended Belnap logic.

Rows and columns of ``BINARY_TABLES`` follow ``DOMAIN``. ``MIXED_TABLES``
hold one row per entry of ``BASE_DOMAIN`` (a plain Belnap operand on the
left) against every entry of ``DOMAIN``.
"""

DOMAIN = (
    'N___',
    '_F__',
    'NF__',
    '__T_',
    'N_T_',
    '_FT_',
    'NFT_',
    '___B',
    'N__B',
    '_F_B',
    'NF_B',
    '__TB',
    'N_TB',
    '_FTB',
    'NFTB',
)

BASE_DOMAIN = (
    'N___',
    '_F__',
    '__T_',
    '___B',
)

BINARY_TABLES = {
    'and': (
        ('N___', '_F__', 'NF__', 'N___', 'N___', 'NF__', 'NF__', '_F__', 'NF__', '_F__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__'),
        ('_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__'),
        ('NF__', '_F__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__', '_F__', 'NF__', '_F__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__'),
        ('N___', '_F__', 'NF__', '__T_', 'N_T_', '_FT_', 'NFT_', '___B', 'N__B', '_F_B', 'NF_B', '__TB', 'N_TB', '_FTB', 'NFTB'),
        ('N___', '_F__', 'NF__', 'N_T_', 'N_T_', 'NFT_', 'NFT_', '_F_B', 'NF_B', '_F_B', 'NF_B', 'NFTB', 'NFTB', 'NFTB', 'NFTB'),
        ('NF__', '_F__', 'NF__', '_FT_', 'NFT_', '_FT_', 'NFT_', '_F_B', 'NF_B', '_F_B', 'NF_B', '_FTB', 'NFTB', '_FTB', 'NFTB'),
        ('NF__', '_F__', 'NF__', 'NFT_', 'NFT_', 'NFT_', 'NFT_', '_F_B', 'NF_B', '_F_B', 'NF_B', 'NFTB', 'NFTB', 'NFTB', 'NFTB'),
        ('_F__', '_F__', '_F__', '___B', '_F_B', '_F_B', '_F_B', '___B', '_F_B', '_F_B', '_F_B', '___B', '_F_B', '_F_B', '_F_B'),
        ('NF__', '_F__', 'NF__', 'N__B', 'NF_B', 'NF_B', 'NF_B', '_F_B', 'NF_B', '_F_B', 'NF_B', 'NF_B', 'NF_B', 'NF_B', 'NF_B'),
        ('_F__', '_F__', '_F__', '_F_B', '_F_B', '_F_B', '_F_B', '_F_B', '_F_B', '_F_B', '_F_B', '_F_B', '_F_B', '_F_B', '_F_B'),
        ('NF__', '_F__', 'NF__', 'NF_B', 'NF_B', 'NF_B', 'NF_B', '_F_B', 'NF_B', '_F_B', 'NF_B', 'NF_B', 'NF_B', 'NF_B', 'NF_B'),
        ('NF__', '_F__', 'NF__', '__TB', 'NFTB', '_FTB', 'NFTB', '___B', 'NF_B', '_F_B', 'NF_B', '__TB', 'NFTB', '_FTB', 'NFTB'),
        ('NF__', '_F__', 'NF__', 'N_TB', 'NFTB', 'NFTB', 'NFTB', '_F_B', 'NF_B', '_F_B', 'NF_B', 'NFTB', 'NFTB', 'NFTB', 'NFTB'),
        ('NF__', '_F__', 'NF__', '_FTB', 'NFTB', '_FTB', 'NFTB', '_F_B', 'NF_B', '_F_B', 'NF_B', '_FTB', 'NFTB', '_FTB', 'NFTB'),
        ('NF__', '_F__', 'NF__', 'NFTB', 'NFTB', 'NFTB', 'NFTB', '_F_B', 'NF_B', '_F_B', 'NF_B', 'NFTB', 'NFTB', 'NFTB', 'NFTB'),
    ),
    'or': (
        ('N___', 'N___', 'N___', '__T_', 'N_T_', 'N_T_', 'N_T_', '__T_', 'N_T_', 'N_T_', 'N_T_', '__T_', 'N_T_', 'N_T_', 'N_T_'),
        ('N___', '_F__', 'NF__', '__T_', 'N_T_', '_FT_', 'NFT_', '___B', 'N__B', '_F_B', 'NF_B', '__TB', 'N_TB', '_FTB', 'NFTB'),
        ('N___', 'NF__', 'NF__', '__T_', 'N_T_', 'NFT_', 'NFT_', '__TB', 'N_TB', 'NFTB', 'NFTB', '__TB', 'N_TB', 'NFTB', 'NFTB'),
        ('__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_'),
        ('N_T_', 'N_T_', 'N_T_', '__T_', 'N_T_', 'N_T_', 'N_T_', '__T_', 'N_T_', 'N_T_', 'N_T_', '__T_', 'N_T_', 'N_T_', 'N_T_'),
        ('N_T_', '_FT_', 'NFT_', '__T_', 'N_T_', '_FT_', 'NFT_', '__TB', 'N_TB', '_FTB', 'NFTB', '__TB', 'N_TB', '_FTB', 'NFTB'),
        ('N_T_', 'NFT_', 'NFT_', '__T_', 'N_T_', 'NFT_', 'NFT_', '__TB', 'N_TB', 'NFTB', 'NFTB', '__TB', 'N_TB', 'NFTB', 'NFTB'),
        ('__T_', '___B', '__TB', '__T_', '__T_', '__TB', '__TB', '___B', '__TB', '___B', '__TB', '__TB', '__TB', '__TB', '__TB'),
        ('N_T_', 'N__B', 'N_TB', '__T_', 'N_T_', 'N_TB', 'N_TB', '__TB', 'N_TB', 'N_TB', 'N_TB', '__TB', 'N_TB', 'N_TB', 'N_TB'),
        ('N_T_', '_F_B', 'NFTB', '__T_', 'N_T_', '_FTB', 'NFTB', '___B', 'N_TB', '_F_B', 'NFTB', '__TB', 'N_TB', '_FTB', 'NFTB'),
        ('N_T_', 'NF_B', 'NFTB', '__T_', 'N_T_', 'NFTB', 'NFTB', '__TB', 'N_TB', 'NFTB', 'NFTB', '__TB', 'N_TB', 'NFTB', 'NFTB'),
        ('__T_', '__TB', '__TB', '__T_', '__T_', '__TB', '__TB', '__TB', '__TB', '__TB', '__TB', '__TB', '__TB', '__TB', '__TB'),
        ('N_T_', 'N_TB', 'N_TB', '__T_', 'N_T_', 'N_TB', 'N_TB', '__TB', 'N_TB', 'N_TB', 'N_TB', '__TB', 'N_TB', 'N_TB', 'N_TB'),
        ('N_T_', '_FTB', 'NFTB', '__T_', 'N_T_', '_FTB', 'NFTB', '__TB', 'N_TB', '_FTB', 'NFTB', '__TB', 'N_TB', '_FTB', 'NFTB'),
        ('N_T_', 'NFTB', 'NFTB', '__T_', 'N_T_', 'NFTB', 'NFTB', '__TB', 'N_TB', 'NFTB', 'NFTB', '__TB', 'N_TB', 'NFTB', 'NFTB'),
    ),
    'xor': (
        ('N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', '_F__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__'),
        ('N___', '_F__', 'NF__', '__T_', 'N_T_', '_FT_', 'NFT_', '___B', 'N__B', '_F_B', 'NF_B', '__TB', 'N_TB', '_FTB', 'NFTB'),
        ('N___', 'NF__', 'NF__', 'N_T_', 'N_T_', 'NFT_', 'NFT_', '_F_B', 'NF_B', 'NF_B', 'NF_B', 'NFTB', 'NFTB', 'NFTB', 'NFTB'),
        ('N___', '__T_', 'N_T_', '_F__', 'NF__', '_FT_', 'NFT_', '___B', 'N__B', '__TB', 'N_TB', '_F_B', 'NF_B', '_FTB', 'NFTB'),
        ('N___', 'N_T_', 'N_T_', 'NF__', 'NF__', 'NFT_', 'NFT_', '_F_B', 'NF_B', 'NFTB', 'NFTB', 'NF_B', 'NF_B', 'NFTB', 'NFTB'),
        ('N___', '_FT_', 'NFT_', '_FT_', 'NFT_', '_FT_', 'NFT_', '___B', 'N__B', '_FTB', 'NFTB', '_FTB', 'NFTB', '_FTB', 'NFTB'),
        ('N___', 'NFT_', 'NFT_', 'NFT_', 'NFT_', 'NFT_', 'NFT_', '_F_B', 'NF_B', 'NFTB', 'NFTB', 'NFTB', 'NFTB', 'NFTB', 'NFTB'),
        ('_F__', '___B', '_F_B', '___B', '_F_B', '___B', '_F_B', '___B', '_F_B', '___B', '_F_B', '___B', '_F_B', '___B', '_F_B'),
        ('NF__', 'N__B', 'NF_B', 'N__B', 'NF_B', 'N__B', 'NF_B', '_F_B', 'NF_B', 'NF_B', 'NF_B', 'NF_B', 'NF_B', 'NF_B', 'NF_B'),
        ('NF__', '_F_B', 'NF_B', '__TB', 'NFTB', '_FTB', 'NFTB', '___B', 'NF_B', '_F_B', 'NF_B', '__TB', 'NFTB', '_FTB', 'NFTB'),
        ('NF__', 'NF_B', 'NF_B', 'N_TB', 'NFTB', 'NFTB', 'NFTB', '_F_B', 'NF_B', 'NF_B', 'NF_B', 'NFTB', 'NFTB', 'NFTB', 'NFTB'),
        ('NF__', '__TB', 'NFTB', '_F_B', 'NF_B', '_FTB', 'NFTB', '___B', 'NF_B', '__TB', 'NFTB', '_F_B', 'NF_B', '_FTB', 'NFTB'),
        ('NF__', 'N_TB', 'NFTB', 'NF_B', 'NF_B', 'NFTB', 'NFTB', '_F_B', 'NF_B', 'NFTB', 'NFTB', 'NF_B', 'NF_B', 'NFTB', 'NFTB'),
        ('NF__', '_FTB', 'NFTB', '_FTB', 'NFTB', '_FTB', 'NFTB', '___B', 'NF_B', '_FTB', 'NFTB', '_FTB', 'NFTB', '_FTB', 'NFTB'),
        ('NF__', 'NFTB', 'NFTB', 'NFTB', 'NFTB', 'NFTB', 'NFTB', '_F_B', 'NF_B', 'NFTB', 'NFTB', 'NFTB', 'NFTB', 'NFTB', 'NFTB'),
    ),
    'superposition': (
        ('N___', '_F__', 'NF__', '__T_', 'N_T_', '_FT_', 'NFT_', '___B', 'N__B', '_F_B', 'NF_B', '__TB', 'N_TB', '_FTB', 'NFTB'),
        ('_F__', '_F__', '_F__', '___B', '_F_B', '_F_B', '_F_B', '___B', '_F_B', '_F_B', '_F_B', '___B', '_F_B', '_F_B', '_F_B'),
        ('NF__', '_F__', 'NF__', '__TB', 'NFTB', '_FTB', 'NFTB', '___B', 'NF_B', '_F_B', 'NF_B', '__TB', 'NFTB', '_FTB', 'NFTB'),
        ('__T_', '___B', '__TB', '__T_', '__T_', '__TB', '__TB', '___B', '__TB', '___B', '__TB', '__TB', '__TB', '__TB', '__TB'),
        ('N_T_', '_F_B', 'NFTB', '__T_', 'N_T_', '_FTB', 'NFTB', '___B', 'N_TB', '_F_B', 'NFTB', '__TB', 'N_TB', '_FTB', 'NFTB'),
        ('_FT_', '_F_B', '_FTB', '__TB', '_FTB', '_FTB', '_FTB', '___B', '_FTB', '_F_B', '_FTB', '__TB', '_FTB', '_FTB', '_FTB'),
        ('NFT_', '_F_B', 'NFTB', '__TB', 'NFTB', '_FTB', 'NFTB', '___B', 'NFTB', '_F_B', 'NFTB', '__TB', 'NFTB', '_FTB', 'NFTB'),
        ('___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B'),
        ('N__B', '_F_B', 'NF_B', '__TB', 'N_TB', '_FTB', 'NFTB', '___B', 'N__B', '_F_B', 'NF_B', '__TB', 'N_TB', '_FTB', 'NFTB'),
        ('_F_B', '_F_B', '_F_B', '___B', '_F_B', '_F_B', '_F_B', '___B', '_F_B', '_F_B', '_F_B', '___B', '_F_B', '_F_B', '_F_B'),
        ('NF_B', '_F_B', 'NF_B', '__TB', 'NFTB', '_FTB', 'NFTB', '___B', 'NF_B', '_F_B', 'NF_B', '__TB', 'NFTB', '_FTB', 'NFTB'),
        ('__TB', '___B', '__TB', '__TB', '__TB', '__TB', '__TB', '___B', '__TB', '___B', '__TB', '__TB', '__TB', '__TB', '__TB'),
        ('N_TB', '_F_B', 'NFTB', '__TB', 'N_TB', '_FTB', 'NFTB', '___B', 'N_TB', '_F_B', 'NFTB', '__TB', 'N_TB', '_FTB', 'NFTB'),
        ('_FTB', '_F_B', '_FTB', '__TB', '_FTB', '_FTB', '_FTB', '___B', '_FTB', '_F_B', '_FTB', '__TB', '_FTB', '_FTB', '_FTB'),
        ('NFTB', '_F_B', 'NFTB', '__TB', 'NFTB', '_FTB', 'NFTB', '___B', 'NFTB', '_F_B', 'NFTB', '__TB', 'NFTB', '_FTB', 'NFTB'),
    ),
    'annihilation': (
        ('N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___'),
        ('N___', '_F__', 'NF__', 'N___', 'N___', 'NF__', 'NF__', '_F__', 'NF__', '_F__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__'),
        ('N___', 'NF__', 'NF__', 'N___', 'N___', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__'),
        ('N___', 'N___', 'N___', '__T_', 'N_T_', 'N_T_', 'N_T_', '__T_', 'N_T_', 'N_T_', 'N_T_', '__T_', 'N_T_', 'N_T_', 'N_T_'),
        ('N___', 'N___', 'N___', 'N_T_', 'N_T_', 'N_T_', 'N_T_', 'N_T_', 'N_T_', 'N_T_', 'N_T_', 'N_T_', 'N_T_', 'N_T_', 'N_T_'),
        ('N___', 'NF__', 'NF__', 'N_T_', 'N_T_', 'NFT_', 'NFT_', '_FT_', 'NFT_', 'NFT_', 'NFT_', 'NFT_', 'NFT_', 'NFT_', 'NFT_'),
        ('N___', 'NF__', 'NF__', 'N_T_', 'N_T_', 'NFT_', 'NFT_', 'NFT_', 'NFT_', 'NFT_', 'NFT_', 'NFT_', 'NFT_', 'NFT_', 'NFT_'),
        ('N___', '_F__', 'NF__', '__T_', 'N_T_', '_FT_', 'NFT_', '___B', 'N__B', '_F_B', 'NF_B', '__TB', 'N_TB', '_FTB', 'NFTB'),
        ('N___', 'NF__', 'NF__', 'N_T_', 'N_T_', 'NFT_', 'NFT_', 'N__B', 'N__B', 'NF_B', 'NF_B', 'N_TB', 'N_TB', 'NFTB', 'NFTB'),
        ('N___', '_F__', 'NF__', 'N_T_', 'N_T_', 'NFT_', 'NFT_', '_F_B', 'NF_B', '_F_B', 'NF_B', 'NFTB', 'NFTB', 'NFTB', 'NFTB'),
        ('N___', 'NF__', 'NF__', 'N_T_', 'N_T_', 'NFT_', 'NFT_', 'NF_B', 'NF_B', 'NF_B', 'NF_B', 'NFTB', 'NFTB', 'NFTB', 'NFTB'),
        ('N___', 'NF__', 'NF__', '__T_', 'N_T_', 'NFT_', 'NFT_', '__TB', 'N_TB', 'NFTB', 'NFTB', '__TB', 'N_TB', 'NFTB', 'NFTB'),
        ('N___', 'NF__', 'NF__', 'N_T_', 'N_T_', 'NFT_', 'NFT_', 'N_TB', 'N_TB', 'NFTB', 'NFTB', 'N_TB', 'N_TB', 'NFTB', 'NFTB'),
        ('N___', 'NF__', 'NF__', 'N_T_', 'N_T_', 'NFT_', 'NFT_', '_FTB', 'NFTB', 'NFTB', 'NFTB', 'NFTB', 'NFTB', 'NFTB', 'NFTB'),
        ('N___', 'NF__', 'NF__', 'N_T_', 'N_T_', 'NFT_', 'NFT_', 'NFTB', 'NFTB', 'NFTB', 'NFTB', 'NFTB', 'NFTB', 'NFTB', 'NFTB'),
    ),
    'eq': (
        ('__T_', '_F__', '_FT_', '_F__', '_FT_', '_F__', '_FT_', '_F__', '_FT_', '_F__', '_FT_', '_F__', '_FT_', '_F__', '_FT_'),
        ('_F__', '__T_', '_FT_', '_F__', '_F__', '_FT_', '_FT_', '_F__', '_F__', '_FT_', '_FT_', '_F__', '_F__', '_FT_', '_FT_'),
        ('_FT_', '_FT_', '_FT_', '_F__', '_FT_', '_FT_', '_FT_', '_F__', '_FT_', '_FT_', '_FT_', '_F__', '_FT_', '_FT_', '_FT_'),
        ('_F__', '_F__', '_F__', '__T_', '_FT_', '_FT_', '_FT_', '_F__', '_F__', '_F__', '_F__', '_FT_', '_FT_', '_FT_', '_FT_'),
        ('_FT_', '_F__', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_F__', '_FT_', '_F__', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_'),
        ('_F__', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_F__', '_F__', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_'),
        ('_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_F__', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_'),
        ('_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '__T_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_'),
        ('_FT_', '_F__', '_FT_', '_F__', '_FT_', '_F__', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_'),
        ('_F__', '_FT_', '_FT_', '_F__', '_F__', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_'),
        ('_FT_', '_FT_', '_FT_', '_F__', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_'),
        ('_F__', '_F__', '_F__', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_'),
        ('_FT_', '_F__', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_'),
        ('_F__', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_'),
        ('_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_'),
    ),
}

MIXED_TABLES = {
    'and': (
        ('N___', '_F__', 'NF__', 'N___', 'N___', 'NF__', 'NF__', '_F__', 'NF__', '_F__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__'),
        ('_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__'),
        ('N___', '_F__', 'NF__', '__T_', 'N_T_', '_FT_', 'NFT_', '___B', 'N__B', '_F_B', 'NF_B', '__TB', 'N_TB', '_FTB', 'NFTB'),
        ('_F__', '_F__', '_F__', '___B', '_F_B', '_F_B', '_F_B', '___B', '_F_B', '_F_B', '_F_B', '___B', '_F_B', '_F_B', '_F_B'),
    ),
    'or': (
        ('N___', 'N___', 'N___', '__T_', 'N_T_', 'N_T_', 'N_T_', '__T_', 'N_T_', 'N_T_', 'N_T_', '__T_', 'N_T_', 'N_T_', 'N_T_'),
        ('N___', '_F__', 'NF__', '__T_', 'N_T_', '_FT_', 'NFT_', '___B', 'N__B', '_F_B', 'NF_B', '__TB', 'N_TB', '_FTB', 'NFTB'),
        ('__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_', '__T_'),
        ('__T_', '___B', '__TB', '__T_', '__T_', '__TB', '__TB', '___B', '__TB', '___B', '__TB', '__TB', '__TB', '__TB', '__TB'),
    ),
    'xor': (
        ('N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', '_F__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__'),
        ('N___', '_F__', 'NF__', '__T_', 'N_T_', '_FT_', 'NFT_', '___B', 'N__B', '_F_B', 'NF_B', '__TB', 'N_TB', '_FTB', 'NFTB'),
        ('N___', '__T_', 'N_T_', '_F__', 'NF__', '_FT_', 'NFT_', '___B', 'N__B', '__TB', 'N_TB', '_F_B', 'NF_B', '_FTB', 'NFTB'),
        ('_F__', '___B', '_F_B', '___B', '_F_B', '___B', '_F_B', '___B', '_F_B', '___B', '_F_B', '___B', '_F_B', '___B', '_F_B'),
    ),
    'superposition': (
        ('N___', '_F__', 'NF__', '__T_', 'N_T_', '_FT_', 'NFT_', '___B', 'N__B', '_F_B', 'NF_B', '__TB', 'N_TB', '_FTB', 'NFTB'),
        ('_F__', '_F__', '_F__', '___B', '_F_B', '_F_B', '_F_B', '___B', '_F_B', '_F_B', '_F_B', '___B', '_F_B', '_F_B', '_F_B'),
        ('__T_', '___B', '__TB', '__T_', '__T_', '__TB', '__TB', '___B', '__TB', '___B', '__TB', '__TB', '__TB', '__TB', '__TB'),
        ('___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B', '___B'),
    ),
    'annihilation': (
        ('N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___', 'N___'),
        ('N___', '_F__', 'NF__', 'N___', 'N___', 'NF__', 'NF__', '_F__', 'NF__', '_F__', 'NF__', 'NF__', 'NF__', 'NF__', 'NF__'),
        ('N___', 'N___', 'N___', '__T_', 'N_T_', 'N_T_', 'N_T_', '__T_', 'N_T_', 'N_T_', 'N_T_', '__T_', 'N_T_', 'N_T_', 'N_T_'),
        ('N___', '_F__', 'NF__', '__T_', 'N_T_', '_FT_', 'NFT_', '___B', 'N__B', '_F_B', 'NF_B', '__TB', 'N_TB', '_FTB', 'NFTB'),
    ),
    'eq': (
        ('__T_', '_F__', '_FT_', '_F__', '_FT_', '_F__', '_FT_', '_F__', '_FT_', '_F__', '_FT_', '_F__', '_FT_', '_F__', '_FT_'),
        ('_F__', '__T_', '_FT_', '_F__', '_F__', '_FT_', '_FT_', '_F__', '_F__', '_FT_', '_FT_', '_F__', '_F__', '_FT_', '_FT_'),
        ('_F__', '_F__', '_F__', '__T_', '_FT_', '_FT_', '_FT_', '_F__', '_F__', '_F__', '_F__', '_FT_', '_FT_', '_FT_', '_FT_'),
        ('_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '_F__', '__T_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_', '_FT_'),
    ),
}

UNARY_TABLES = {
    'not': (
        'N___', '__T_', 'N_T_', '_F__', 'NF__', '_FT_', 'NFT_', '___B', 'N__B', '__TB', 'N_TB', '_F_B', 'NF_B', '_FTB', 'NFTB',
    ),
}
