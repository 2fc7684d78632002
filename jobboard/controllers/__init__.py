"""
State controllers.

- form: Field values, touched-gated validation, submission
- pagination: Paged list fetching with stale-response discard
- request: Loading/error state for single API calls
- values: Tagged form field values
"""

from jobboard.controllers.form import FormController
from jobboard.controllers.pagination import ListStatus, PaginatedListController
from jobboard.controllers.request import RequestResult, RequestTracker

__all__ = ["FormController", "PaginatedListController", "ListStatus", "RequestTracker", "RequestResult"]
