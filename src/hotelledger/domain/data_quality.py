"""Data quality audit over the ledger store."""

from decimal import Decimal

from hotelledger.domain.entities import (
    BusinessArea,
    ClassReconciliation,
    DataQualityReport,
    LedgerKind,
    PeriodPresence,
)
from hotelledger.domain.ledger_store import LedgerStore
from hotelledger.utils.period import iter_periods

UNKNOWN_CLASS = "Unbekannt"


def audit(store: LedgerStore) -> DataQualityReport:
    """Scan the store for classification gaps and missing periods.

    The audit only reads the store and can be re-run at any time.

    Args:
        store: Ledger store to audit

    Returns:
        DataQualityReport with:
        - unclassified_accounts: accounts in area Sonstiges
        - untyped_accounts: accounts of kind Neutral
        - class_reconciliation: per account class, account/balance counts and
          debit/credit/net sums over all balances
        - missing_periods: every month from the first to the last uploaded
          batch with its presence flag (empty without batches)
    """
    accounts = store.accounts
    balances = store.balances

    unclassified = tuple(a for a in accounts if a.area == BusinessArea.OTHER)
    untyped = tuple(a for a in accounts if a.kind == LedgerKind.NEUTRAL)

    sums: dict[str, dict] = {}
    for balance in balances:
        account = store.get_account(balance.account_number)
        account_class = UNKNOWN_CLASS
        if account is not None and account.account_class:
            account_class = account.account_class
        entry = sums.setdefault(
            account_class,
            {
                "accounts": set(),
                "balances": 0,
                "debit": Decimal("0"),
                "credit": Decimal("0"),
                "net": Decimal("0"),
            },
        )
        entry["accounts"].add(balance.account_number)
        entry["balances"] += 1
        entry["debit"] += balance.debit_total
        entry["credit"] += balance.credit_total
        entry["net"] += balance.net_balance

    reconciliation = tuple(
        ClassReconciliation(
            account_class=account_class,
            account_count=len(entry["accounts"]),
            balance_count=entry["balances"],
            debit_total=entry["debit"],
            credit_total=entry["credit"],
            net_total=entry["net"],
        )
        for account_class, entry in sorted(sums.items())
    )

    present = tuple(sorted({batch.period for batch in store.batches}))
    missing_periods: tuple[PeriodPresence, ...] = ()
    if present:
        present_set = set(present)
        missing_periods = tuple(
            PeriodPresence(year=p.year, month=p.month, present=p in present_set)
            for p in iter_periods(present[0], present[-1])
        )

    return DataQualityReport(
        unclassified_accounts=unclassified,
        untyped_accounts=untyped,
        class_reconciliation=reconciliation,
        missing_periods=missing_periods,
        total_accounts=len(accounts),
        total_balances=len(balances),
        present_periods=present,
    )
