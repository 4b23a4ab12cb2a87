"""Domain layer for hotelledger application.

Services are imported from their modules (e.g.
``hotelledger.domain.comparison``); only entities and errors are re-exported
here so the database layer can import them without cycles.
"""

from hotelledger.domain.entities import (
    Account,
    AreaAggregate,
    BusinessArea,
    ComparisonRow,
    DataQualityReport,
    LedgerKind,
    MonthlyBalance,
    Period,
    UploadBatch,
)
from hotelledger.domain.errors import DomainError

__all__ = [
    "Account",
    "AreaAggregate",
    "BusinessArea",
    "ComparisonRow",
    "DataQualityReport",
    "DomainError",
    "LedgerKind",
    "MonthlyBalance",
    "Period",
    "UploadBatch",
]
