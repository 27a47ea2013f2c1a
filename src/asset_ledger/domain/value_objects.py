from enum import Enum

from asset_ledger.exceptions import InvalidCurrencyError


class CurrencyCode(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CAD = "CAD"
    AUD = "AUD"
    CHF = "CHF"
    CNY = "CNY"
    INR = "INR"
    RUB = "RUB"
    BRL = "BRL"
    ZAR = "ZAR"
    MXN = "MXN"
    KRW = "KRW"
    SEK = "SEK"
    NOK = "NOK"
    DKK = "DKK"
    HKD = "HKD"
    SGD = "SGD"
    NZD = "NZD"
    THB = "THB"
    TRY = "TRY"
    MYR = "MYR"
    IDR = "IDR"
    PHP = "PHP"
    PLN = "PLN"
    HUF = "HUF"
    CZK = "CZK"
    ILS = "ILS"
    AED = "AED"
    SAR = "SAR"
    KWD = "KWD"
    BDT = "BDT"
    LKR = "LKR"
    VND = "VND"
    EGP = "EGP"
    NGN = "NGN"
    ARS = "ARS"
    CLP = "CLP"
    PKR = "PKR"
    RON = "RON"
    UAH = "UAH"
    BGN = "BGN"
    HRK = "HRK"
    RSD = "RSD"
    ISK = "ISK"
    JOD = "JOD"
    OMR = "OMR"
    QAR = "QAR"
    MVR = "MVR"

    @classmethod
    def parse(cls, code: str) -> "CurrencyCode":
        """Parse a currency code, case-insensitively.

        Raises:
            InvalidCurrencyError: If the code is not a supported currency.
        """
        try:
            return cls(code.strip().upper())
        except ValueError:
            raise InvalidCurrencyError(code) from None


class RecurrenceFrequency(str, Enum):
    SINGLE = "single"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class AssetType(str, Enum):
    CASH = "cash"
    BANK_ACCOUNT = "bank_account"
    SAVINGS_ACCOUNT = "savings_account"
    CHECKING_ACCOUNT = "checking_account"
    STOCKS = "stocks"
    BONDS = "bonds"
    MUTUAL_FUNDS = "mutual_funds"
    ETFS = "etfs"
    CRYPTO = "crypto"
    PENSION_FUND = "pension_fund"
    REAL_ESTATE = "real_estate"
    VEHICLE = "vehicle"
    PRECIOUS_METALS = "precious_metals"
    RETIREMENT_ACCOUNT = "retirement_account"
    MORTGAGE = "mortgage"
    CREDIT_CARD_DEBT = "credit_card_debt"
    LOAN = "loan"
    OTHER = "other"
