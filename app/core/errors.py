"""Domain errors raised by services."""


class RecordInvalid(Exception):
    """A write was rejected because one or more fields are invalid.

    ``errors`` maps a field name to the list of messages for that field.
    """

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        super().__init__(", ".join(f"{field} {'; '.join(msgs)}" for field, msgs in errors.items()))
