from .enum import ServiceKind as ServiceKind
from .service import PriceQuoteEngine as PriceQuoteEngine
from .value_object import PriceQuote as PriceQuote
