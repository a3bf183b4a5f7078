#Copyright (c) 2024 Vanderbilt University
#Authors: Jules White, Allen Karns, Karely Rodriguez, Max Moundas

"""
DynamoDB proxies pick the rules for "hashKey" and "rangeKey" from their
siblings:

- an explicit, allowed "action" means the keys follow the default key scheme
  (a string, or one pathParam/queryStringParam plus an attributeType);
- otherwise a "post" method makes AWS generate the hash key, so "hashKey" must
  be the attribute name as a plain string (and "rangeKey", if given, too);
- anything else falls back to the default key scheme.

"action" itself is mandatory for methods that do not map onto an item
operation (options, head, any).
"""

from common.errors import custom_error_builder, custom_multiple_error_builder, with_errors
from schemata.common_schema import (
    entry_schema,
    non_empty_string,
    proxy_schema,
    ref_schema,
)
from schemata.key_schemas import dynamodb_default_key_scheme

DYNAMODB_ACTIONS = ["PutItem", "GetItem", "DeleteItem", "UpdateItem"]

ACTION_REQUIRED_METHODS = ["options", "head", "any"]

HASH_KEY_STRING_MESSAGE = (
    '"hashKey" must be a string when you define post "method" and not define'
    ' "action" explicitly since the hashKey value is auto-generated on AWS end'
)

HASH_KEY_REQUIRED_MESSAGE = (
    '"hashKey" is required when you define post "method" and not define'
    ' "action" explicitly since the hashKey value is auto-generated on AWS end'
)

RANGE_KEY_STRING_MESSAGE = (
    '"rangeKey" must be a string when you define post to "method" and not define'
    ' "action" explicitly since the hashKey value is auto-generated on AWS end'
)

ACTION_REQUIRED_MESSAGE = (
    '"action" is required when you define options, head, any to "method" property'
)

has_allowed_action = {
    "properties": {"action": {"enum": DYNAMODB_ACTIONS}},
    "required": ["action"],
}

has_post_method = {
    "properties": {"method": {"enum": ["post"], "insensitive": True}},
    "required": ["method"],
}

default_keys = {
    "properties": {
        "hashKey": dynamodb_default_key_scheme,
        "rangeKey": dynamodb_default_key_scheme,
    }
}

post_keys = {
    "allOf": [
        with_errors(
            {
                "properties": {"hashKey": non_empty_string},
                "required": ["hashKey"],
            },
            custom_multiple_error_builder(
                {
                    "string.base": HASH_KEY_STRING_MESSAGE,
                    "any.required": HASH_KEY_REQUIRED_MESSAGE,
                }
            ),
        ),
        with_errors(
            {"properties": {"rangeKey": non_empty_string}},
            custom_error_builder("string.base", RANGE_KEY_STRING_MESSAGE),
        ),
    ]
}

key_rules = {
    "if": has_allowed_action,
    "then": default_keys,
    "else": {
        "if": has_post_method,
        "then": post_keys,
        "else": default_keys,
    },
}

action_rule = {
    "if": {
        "properties": {"method": {"enum": ACTION_REQUIRED_METHODS, "insensitive": True}},
        "required": ["method"],
    },
    "then": with_errors(
        {"required": ["action"]},
        custom_error_builder("any.required", ACTION_REQUIRED_MESSAGE),
    ),
}

dynamodb_schema = entry_schema(
    "dynamodb",
    proxy_schema(
        {
            "action": {"type": "string", "enum": DYNAMODB_ACTIONS},
            "tableName": {"alternatives": [non_empty_string, ref_schema]},
            "hashKey": {},
            "rangeKey": {},
        },
        required=["tableName"],
        rules=[action_rule, key_rules],
    ),
)
