"""Exception hierarchy shared by the qrab modules."""


class QrabError(Exception):
    """Base class for every error the CLI reports to the user."""
