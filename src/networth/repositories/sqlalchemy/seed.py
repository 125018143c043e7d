"""Reference data loaded at startup: supported currencies and the asset catalog.

Seeding is idempotent. Existing currencies are left alone; existing assets
get their name, type, provider symbol and source refreshed while their last
known price, currency and icon are kept.
"""

import logging

from sqlalchemy.orm import Session

from networth.domain.models import AssetType, PriceSource
from networth.repositories.sqlalchemy.orm_models import AssetORM, CurrencyORM

logger = logging.getLogger(__name__)


# (code, symbol, name)
CURRENCIES: list[tuple[str, str, str]] = [
    ("AUD", "A$", "Australian Dollar"),
    ("CAD", "C$", "Canadian Dollar"),
    ("CHF", "Fr", "Swiss Franc"),
    ("CNY", "¥", "Chinese Yuan"),
    ("EUR", "€", "Euro"),
    ("GBP", "£", "British Pound"),
    ("HKD", "HK$", "Hong Kong Dollar"),
    ("IDR", "Rp", "Indonesian Rupiah"),
    ("INR", "₹", "Indian Rupee"),
    ("JPY", "¥", "Japanese Yen"),
    ("KRW", "₩", "South Korean Won"),
    ("MYR", "RM", "Malaysian Ringgit"),
    ("NZD", "NZ$", "New Zealand Dollar"),
    ("SGD", "S$", "Singapore Dollar"),
    ("USD", "$", "US Dollar"),
]

_CRYPTO = AssetType.CRYPTO.value
_STOCK = AssetType.STOCK.value
_COINGECKO = PriceSource.COINGECKO.value
_YAHOO = PriceSource.YAHOO.value

# (ticker, name, asset_type, api_ticker, source)
ASSET_CATALOG: list[tuple[str, str, str, str, str]] = [
    ("BTC", "Bitcoin", _CRYPTO, "bitcoin", _COINGECKO),
    ("ETH", "Ethereum", _CRYPTO, "ethereum", _COINGECKO),
    ("BNB", "Binance Coin", _CRYPTO, "binancecoin", _COINGECKO),
    ("SOL", "Solana", _CRYPTO, "solana", _COINGECKO),
    ("XRP", "Ripple", _CRYPTO, "ripple", _COINGECKO),
    ("ADA", "Cardano", _CRYPTO, "cardano", _COINGECKO),
    ("DOGE", "Dogecoin", _CRYPTO, "dogecoin", _COINGECKO),
    ("TRX", "TRON", _CRYPTO, "tron", _COINGECKO),
    ("DOT", "Polkadot", _CRYPTO, "polkadot", _COINGECKO),
    ("MATIC", "Polygon", _CRYPTO, "matic-network", _COINGECKO),
    ("AVAX", "Avalanche", _CRYPTO, "avalanche-2", _COINGECKO),
    ("UMBRA", "Umbra Network", _CRYPTO, "umbra-network", _COINGECKO),
    ("AAPL", "Apple Inc.", _STOCK, "AAPL", _YAHOO),
    ("MSFT", "Microsoft Corporation", _STOCK, "MSFT", _YAHOO),
    ("GOOGL", "Alphabet Inc.", _STOCK, "GOOGL", _YAHOO),
    ("AMZN", "Amazon.com Inc.", _STOCK, "AMZN", _YAHOO),
    ("NVDA", "NVIDIA Corporation", _STOCK, "NVDA", _YAHOO),
    ("TSLA", "Tesla Inc.", _STOCK, "TSLA", _YAHOO),
    ("META", "Meta Platforms Inc.", _STOCK, "META", _YAHOO),
    ("BRK.B", "Berkshire Hathaway Inc.", _STOCK, "BRK-B", _YAHOO),
    ("LLY", "Eli Lilly and Company", _STOCK, "LLY", _YAHOO),
    ("V", "Visa Inc.", _STOCK, "V", _YAHOO),
    ("TSM", "Taiwan Semiconductor Manufacturing", _STOCK, "TSM", _YAHOO),
    ("UNH", "UnitedHealth Group", _STOCK, "UNH", _YAHOO),
    ("XOM", "Exxon Mobil Corporation", _STOCK, "XOM", _YAHOO),
    ("JNJ", "Johnson & Johnson", _STOCK, "JNJ", _YAHOO),
    ("JPM", "JPMorgan Chase & Co.", _STOCK, "JPM", _YAHOO),
    ("WMT", "Walmart Inc.", _STOCK, "WMT", _YAHOO),
    ("MA", "Mastercard Incorporated", _STOCK, "MA", _YAHOO),
    ("PG", "Procter & Gamble Company", _STOCK, "PG", _YAHOO),
    ("AVGO", "Broadcom Inc.", _STOCK, "AVGO", _YAHOO),
    ("HD", "The Home Depot", _STOCK, "HD", _YAHOO),
    ("CVX", "Chevron Corporation", _STOCK, "CVX", _YAHOO),
    ("MRK", "Merck & Co.", _STOCK, "MRK", _YAHOO),
    ("ABBV", "AbbVie Inc.", _STOCK, "ABBV", _YAHOO),
    ("KO", "The Coca-Cola Company", _STOCK, "KO", _YAHOO),
    ("PEP", "PepsiCo Inc.", _STOCK, "PEP", _YAHOO),
    ("COST", "Costco Wholesale", _STOCK, "COST", _YAHOO),
    ("BAC", "Bank of America", _STOCK, "BAC", _YAHOO),
    ("ADBE", "Adobe Inc.", _STOCK, "ADBE", _YAHOO),
    ("CRM", "Salesforce Inc.", _STOCK, "CRM", _YAHOO),
    ("AMD", "Advanced Micro Devices", _STOCK, "AMD", _YAHOO),
    ("NFLX", "Netflix Inc.", _STOCK, "NFLX", _YAHOO),
    ("MCD", "McDonald's Corporation", _STOCK, "MCD", _YAHOO),
    ("CSCO", "Cisco Systems", _STOCK, "CSCO", _YAHOO),
    ("INTC", "Intel Corporation", _STOCK, "INTC", _YAHOO),
    ("T", "AT&T Inc.", _STOCK, "T", _YAHOO),
    ("DIS", "The Walt Disney Company", _STOCK, "DIS", _YAHOO),
    ("NKE", "Nike Inc.", _STOCK, "NKE", _YAHOO),
    ("VZ", "Verizon Communications", _STOCK, "VZ", _YAHOO),
    ("CMCSA", "Comcast Corporation", _STOCK, "CMCSA", _YAHOO),
    ("PFE", "Pfizer Inc.", _STOCK, "PFE", _YAHOO),
    ("INTU", "Intuit Inc.", _STOCK, "INTU", _YAHOO),
    ("QCOM", "Qualcomm Inc.", _STOCK, "QCOM", _YAHOO),
    ("IBM", "IBM", _STOCK, "IBM", _YAHOO),
    ("AMGN", "Amgen Inc.", _STOCK, "AMGN", _YAHOO),
    ("TXN", "Texas Instruments", _STOCK, "TXN", _YAHOO),
    ("GE", "General Electric", _STOCK, "GE", _YAHOO),
    ("NOW", "ServiceNow", _STOCK, "NOW", _YAHOO),
    ("SPY", "SPDR S&P 500 ETF Trust", _STOCK, "SPY", _YAHOO),
    ("VOO", "Vanguard S&P 500 ETF", _STOCK, "VOO", _YAHOO),
    ("QQQ", "Invesco QQQ Trust", _STOCK, "QQQ", _YAHOO),
]


def seed_currencies(db: Session) -> int:
    """Insert missing supported currencies; returns the number added."""
    existing = {row.code for row in db.query(CurrencyORM.code).all()}
    added = 0
    for code, symbol, name in CURRENCIES:
        if code in existing:
            continue
        db.add(CurrencyORM(code=code, symbol=symbol, name=name))
        added += 1
    db.commit()
    return added


def seed_assets(db: Session) -> int:
    """Insert or refresh catalog entries; returns the number added."""
    existing = {a.ticker: a for a in db.query(AssetORM).all()}
    added = 0
    for ticker, name, asset_type, api_ticker, source in ASSET_CATALOG:
        orm_asset = existing.get(ticker)
        if orm_asset is None:
            db.add(
                AssetORM(
                    ticker=ticker,
                    name=name,
                    asset_type=asset_type,
                    api_ticker=api_ticker,
                    source=source,
                )
            )
            added += 1
        else:
            orm_asset.name = name
            orm_asset.asset_type = asset_type
            orm_asset.api_ticker = api_ticker
            orm_asset.source = source
    db.commit()
    return added


def seed_reference_data(db: Session) -> None:
    """Load currencies and the asset catalog."""
    currencies = seed_currencies(db)
    assets = seed_assets(db)
    logger.info("Seeded %d currencies and %d assets", currencies, assets)
