from .price_quote import PriceQuote as PriceQuote
