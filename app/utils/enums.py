import enum


class AccountType(enum.Enum):
    """Enum for account types"""

    BANK = "BANK"
    CASH = "CASH"
    SAVINGS = "SAVINGS"
    INVESTMENT = "INVESTMENT"


class CategoryType(enum.Enum):
    """Enum for category types"""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class Frequency(enum.Enum):
    """Enum for recurring rule frequency"""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    BIWEEKLY = "BIWEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"
