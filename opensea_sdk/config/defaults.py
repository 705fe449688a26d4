"""Well-known endpoints and protocol versions."""

from opensea_sdk.models.common import Network

ORDERBOOK_VERSION = 1
API_VERSION = 1
DEFAULT_PAGE_SIZE = 20
DEFAULT_TIMEOUT = 30.0

API_BASE_MAINNET = "https://api.opensea.io"
API_BASE_RINKEBY = "https://rinkeby-api.opensea.io"
SITE_HOST_MAINNET = "https://opensea.io"
SITE_HOST_RINKEBY = "https://rinkeby.opensea.io"

API_BASE_URLS: dict[Network, str] = {
    Network.MAIN: API_BASE_MAINNET,
    Network.RINKEBY: API_BASE_RINKEBY,
}

SITE_HOSTS: dict[Network, str] = {
    Network.MAIN: SITE_HOST_MAINNET,
    Network.RINKEBY: SITE_HOST_RINKEBY,
}

API_KEY_ENV_VAR = "OPENSEA_API_KEY"
