#Copyright (c) 2024 Vanderbilt University
#Authors: Jules White, Allen Karns, Karely Rodriguez, Max Moundas

LABEL = "{label}"

ERROR_TYPES = {
    "required": "any.required",
    "enum": "any.allowOnly",
    "minLength": "any.empty",
    "minimum": "number.min",
    "minItems": "array.min",
    "maxItems": "array.max",
    "additionalProperties": "object.allowUnknown",
    "oxor": "object.oxor",
    "alternatives": "alternatives.base",
    "itemsAnyOf": "array.includes",
}


class ProxyConfigError(Exception):
    def __init__(self, errors):
        super().__init__(". ".join(error["message"] for error in errors))
        self.errors = errors


class ConfigLoadError(Exception):
    pass


def error_type(error):
    """
    Return the error-kind label for a jsonschema ValidationError.

    Labels follow the "<category>.<rule>" naming used across the schemata, e.g.
    "any.required", "string.base", "object.xor".
    """
    keyword = error.validator
    if keyword == "type":
        expected = error.validator_value
        if isinstance(expected, list):
            expected = expected[0]
        return f"{expected}.base"
    if keyword == "xor":
        present = [peer for peer in error.validator_value if peer in error.instance]
        return "object.xor" if present else "object.missing"
    return ERROR_TYPES.get(keyword, f"any.{keyword}")


def error_path(error):
    return ".".join(str(part) for part in error.absolute_path)


def error_label(error):
    if not error.absolute_path:
        return "value"
    return str(error.absolute_path[-1])


def format_message(error):
    if getattr(error, "rewritten", False):
        return error.message
    return error.message.replace(LABEL, error_label(error))


def format_error(error):
    return {
        "type": error_type(error),
        "path": error_path(error),
        "message": format_message(error),
    }


# builder output is final text and may quote user values
def _rewrite(error, message):
    error.message = message
    error.rewritten = True


def custom_error_builder(type, message):
    """
    Build an error rewriter for a single error kind.

    :param type: error-kind label to match, e.g. "object.oxor"
    :param message: replacement text, or a callable taking the failing error
    """

    def builder(errors):
        for error in errors:
            if error_type(error) == type:
                _rewrite(error, message(error) if callable(message) else message)
        return errors

    return builder


# e.g. error_messages is {"string.base": message1, "any.required": message2}
def custom_multiple_error_builder(error_messages):
    def builder(errors):
        for error in errors:
            kind = error_type(error)
            if kind in error_messages:
                _rewrite(error, error_messages[kind])
        return errors

    return builder


def with_errors(schema, builder):
    return {"errorBuilder": {"builder": builder, "schema": schema}}
