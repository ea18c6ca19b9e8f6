"""Domain service base."""


class Service:
    """Marker base for domain services.

    Services own the rules that span entities, such as comment nesting and
    notification fan-out, and talk to storage only through repositories.
    """
