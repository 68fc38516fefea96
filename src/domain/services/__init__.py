"""Domain services for RSVP Event Guard.

Pure business logic with no collaborators:
- Assertions: accumulate-then-raise collector for one validation pass
- reconcile_members: full outer join of two rosters by member id
"""

from src.domain.services.assertions import Assertions
from src.domain.services.member_reconciliation import MemberPair, reconcile_members

__all__: list[str] = ["Assertions", "MemberPair", "reconcile_members"]
