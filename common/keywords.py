#Copyright (c) 2024 Vanderbilt University
#Authors: Jules White, Allen Karns, Karely Rodriguez, Max Moundas

"""
jsonschema vocabulary used by the proxy schemata.

Built-in Draft 7 keywords are re-phrased so every error reads like
'"streamName" is required' instead of the generic jsonschema wording. Custom
keywords:

- alternatives: list of schemas; the value must match one of them. Only the
  alternatives whose "type" fits the value are tried, so their errors are the
  ones reported.
- xor / oxor: exactly one / at most one of the listed keys may be present.
- insensitive: makes a sibling "enum" compare strings case-insensitively.
- itemsAnyOf: every array item must match at least one of the listed schemas.
- errorBuilder: {"builder": fn, "schema": subschema}; the subschema's errors
  are passed through fn (see common.errors) before being reported.

Messages may contain the {label} placeholder; it is resolved against the
error's location when the error is formatted. Messages set by an errorBuilder
are reported as written.
"""

from jsonschema import Draft7Validator, validators
from jsonschema.exceptions import ValidationError

from common.errors import LABEL

ARTICLES = {
    "array": "an array",
    "integer": "an integer",
    "object": "an object",
}


def _as_list(value):
    return value if isinstance(value, list) else [value]


def _describe_type(type):
    return ARTICLES.get(type, f"a {type}")


def _types_of(option):
    while "type" not in option and "errorBuilder" in option:
        option = option["errorBuilder"]["schema"]
    return _as_list(option.get("type", []))


def _present(peers, instance):
    return [peer for peer in peers if peer in instance]


def _join(values):
    return ", ".join(str(value) for value in values)


def type_(validator, types, instance, schema):
    types = _as_list(types)
    if not any(validator.is_type(instance, type) for type in types):
        expected = " or ".join(_describe_type(type) for type in types)
        yield ValidationError(f'"{LABEL}" must be {expected}')


def enum(validator, allowed, instance, schema):
    # wrong types are reported by the sibling "type" keyword
    if "type" in schema and not any(
        validator.is_type(instance, type) for type in _as_list(schema["type"])
    ):
        return
    if schema.get("insensitive") and isinstance(instance, str):
        matched = instance.lower() in [
            value.lower() for value in allowed if isinstance(value, str)
        ]
    else:
        matched = any(instance == value and type(instance) == type(value) for value in allowed)
    if not matched:
        yield ValidationError(f'"{LABEL}" must be one of [{_join(allowed)}]')


def required(validator, required_keys, instance, schema):
    if not validator.is_type(instance, "object"):
        return
    for key in required_keys:
        if key not in instance:
            yield ValidationError(f'"{key}" is required', path=[key])


def additional_properties(validator, additional, instance, schema):
    if not validator.is_type(instance, "object"):
        return
    known = schema.get("properties", {})
    extras = [key for key in instance if key not in known]
    if additional is False:
        for key in extras:
            yield ValidationError(f'"{key}" is not allowed', path=[key])
    elif isinstance(additional, dict):
        for key in extras:
            yield from validator.descend(instance[key], additional, path=key)


def min_length(validator, limit, instance, schema):
    if not validator.is_type(instance, "string") or len(instance) >= limit:
        return
    if limit == 1:
        yield ValidationError(f'"{LABEL}" is not allowed to be empty')
    else:
        yield ValidationError(f'"{LABEL}" length must be at least {limit} characters long')


def minimum(validator, limit, instance, schema):
    if validator.is_type(instance, "number") and instance < limit:
        yield ValidationError(f'"{LABEL}" must be larger than or equal to {limit}')


def min_items(validator, limit, instance, schema):
    if validator.is_type(instance, "array") and len(instance) < limit:
        yield ValidationError(f'"{LABEL}" must contain at least {limit} items')


def max_items(validator, limit, instance, schema):
    if validator.is_type(instance, "array") and len(instance) > limit:
        yield ValidationError(f'"{LABEL}" must contain less than or equal to {limit} items')


def alternatives(validator, options, instance, schema):
    candidates = [
        option for option in options
        if any(validator.is_type(instance, type) for type in _types_of(option))
    ]
    if not candidates:
        expected = " or ".join(
            _describe_type(type) for option in options for type in _types_of(option)
        )
        yield ValidationError(f'"{LABEL}" must be {expected}')
        return

    failures = []
    for option in candidates:
        errors = list(validator.descend(instance, option))
        if not errors:
            return
        failures.append(errors)
    yield from failures[0]


def xor(validator, peers, instance, schema):
    if not validator.is_type(instance, "object"):
        return
    present = _present(peers, instance)
    if not present:
        yield ValidationError(f'"{LABEL}" must contain at least one of [{_join(peers)}]')
    elif len(present) > 1:
        yield ValidationError(
            f'"{LABEL}" contains a conflict between exclusive peers [{_join(present)}]'
        )


def oxor(validator, peers, instance, schema):
    if not validator.is_type(instance, "object"):
        return
    present = _present(peers, instance)
    if len(present) > 1:
        yield ValidationError(
            f'"{LABEL}" contains a conflict between optional exclusive peers [{_join(present)}]'
        )


def items_any_of(validator, options, instance, schema):
    if not validator.is_type(instance, "array"):
        return
    for index, item in enumerate(instance):
        if not any(validator.evolve(schema=option).is_valid(item) for option in options):
            yield ValidationError(
                f'"value" at position {index} does not match any of the allowed types',
                path=[index],
                instance=item,
            )


def error_builder(validator, value, instance, schema):
    errors = list(validator.descend(instance, value["schema"]))
    yield from value["builder"](errors)


def is_array(checker, instance):
    return isinstance(instance, (list, tuple))


ProxySchemaValidator = validators.extend(
    Draft7Validator,
    {
        "type": type_,
        "enum": enum,
        "required": required,
        "additionalProperties": additional_properties,
        "minLength": min_length,
        "minimum": minimum,
        "minItems": min_items,
        "maxItems": max_items,
        "alternatives": alternatives,
        "xor": xor,
        "oxor": oxor,
        "itemsAnyOf": items_any_of,
        "errorBuilder": error_builder,
    },
    type_checker=Draft7Validator.TYPE_CHECKER.redefine("array", is_array),
)
