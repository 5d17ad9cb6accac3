"""
Fuzzy transaction matching.

Bank feeds and manually entered transactions rarely share a stable identifier,
so deciding whether two records describe the same real-world payment comes
down to comparing amount, date proximity and description text. The same
matcher backs recurring-expense reconciliation and bank-sync deduplication;
callers differ only in the tolerances and exclusion rule they pass.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Callable, Iterable, List, Optional

from fintrack.services.dates import as_date

# External ids at least this long come from the bank feed and are considered verified
BANK_UUID_MIN_LENGTH = 21

# Name tokens shorter than this ("the", "co") are too generic to match on their own
MIN_TOKEN_LENGTH = 4


@dataclass(frozen=True)
class MatchTarget:
    """The payment we are looking for."""
    amount: Decimal
    date: date
    reference_name: str = ""
    description_pattern: Optional[str] = None


@dataclass(frozen=True)
class MatchTolerances:
    amount_absolute: Decimal = Decimal("12.0")
    date_window_days: int = 5


def looks_like_bank_uuid(external_id: Optional[str]) -> bool:
    """True if the id was assigned by the bank feed rather than by a user or import."""
    return bool(external_id) and len(external_id) >= BANK_UUID_MIN_LENGTH


def name_tokens(reference_name: str) -> List[str]:
    return [t.lower() for t in reference_name.split() if len(t) >= MIN_TOKEN_LENGTH]


def description_matches(description: Optional[str], target: MatchTarget) -> bool:
    """
    Case-insensitive description check.

    An explicit pattern must appear in the description. Without one, the full
    reference name may appear, or failing that any of its longer words.
    An empty reference name places no constraint on the description.
    """
    desc = (description or "").lower()

    if target.description_pattern:
        return target.description_pattern.lower() in desc

    if target.reference_name.lower() in desc:
        return True

    return any(token in desc for token in name_tokens(target.reference_name))


def amount_matches(amount: Any, target: MatchTarget, tolerances: MatchTolerances) -> bool:
    """Compare magnitudes; income/expense direction is ignored."""
    magnitude = abs(Decimal(str(amount)))
    return abs(magnitude - Decimal(str(target.amount))) < tolerances.amount_absolute


def date_distance(txn_date: date, target: MatchTarget) -> int:
    return abs((as_date(txn_date) - as_date(target.date)).days)


def find_candidates(
    transactions: Iterable[Any],
    target: MatchTarget,
    tolerances: Optional[MatchTolerances] = None,
    exclude: Optional[Callable[[Any], bool]] = None,
) -> List[Any]:
    """
    Return transactions plausibly representing the target payment, closest date first.

    A transaction qualifies when its amount, date and description all fall
    within tolerance and `exclude` (if given) does not reject it. Transactions
    only need `amount`, `date` and `description` attributes. The input is
    never modified.
    """
    tolerances = tolerances or MatchTolerances()
    window = timedelta(days=tolerances.date_window_days)
    target_date = as_date(target.date)
    min_date = target_date - window
    max_date = target_date + window

    candidates = []
    for txn in transactions:
        txn_date = as_date(txn.date)
        if txn_date < min_date or txn_date > max_date:
            continue
        if not amount_matches(txn.amount, target, tolerances):
            continue
        if not description_matches(txn.description, target):
            continue
        if exclude is not None and exclude(txn):
            continue
        candidates.append(txn)

    # sorted() is stable, so equally close candidates keep their input order
    return sorted(candidates, key=lambda t: date_distance(t.date, target))
