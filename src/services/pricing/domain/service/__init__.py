from .price_quote_engine import PriceQuoteEngine as PriceQuoteEngine
