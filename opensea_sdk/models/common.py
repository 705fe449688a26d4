"""Common enums and constants shared across models.

Integer enums cross the wire to the Wyvern exchange contracts, so their
values must not change.
"""

from enum import IntEnum, StrEnum

NULL_ADDRESS = "0x0000000000000000000000000000000000000000"


class Network(StrEnum):
    MAIN = "main"
    RINKEBY = "rinkeby"


class OrderSide(IntEnum):
    BUY = 0
    SELL = 1


class FeeMethod(IntEnum):
    """ProtocolFee charges maker fee to seller and taker fee to buyer.

    SplitFee deducts maker fees from the tokens the maker receives, and
    taker fees are extra tokens paid by the taker.
    """

    PROTOCOL_FEE = 0
    SPLIT_FEE = 1


class SaleKind(IntEnum):
    # Wyvern itself numbers EnglishAuction as 1; OpenSea does not.
    FIXED_PRICE = 0
    DUTCH_AUCTION = 1


class HowToCall(IntEnum):
    CALL = 0
    DELEGATE_CALL = 1
    STATIC_CALL = 2
    CREATE = 3


class WyvernSchemaName(StrEnum):
    ERC721 = "ERC721"
