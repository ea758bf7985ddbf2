# schema/errors.py


class SchemaError(Exception):
    """Base class for problems reading the committed schema document."""


class SchemaNotFound(SchemaError):
    pass


class SchemaUnreadable(SchemaError):
    pass
