
from . acquirer import ContentAcquirer, SUPPORTED_SCHEMES

