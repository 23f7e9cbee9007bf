"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span several entities: the follow
    graph, the engagement ledger and the notifications derived from both.
    """

    pass
