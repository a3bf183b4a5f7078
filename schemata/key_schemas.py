#Copyright (c) 2024 Vanderbilt University
#Authors: Jules White, Allen Karns, Karely Rodriguez, Max Moundas

from common.errors import custom_error_builder, custom_multiple_error_builder, with_errors
from schemata.common_schema import non_empty_string, ref_schema

# errors raised inside a { 'Fn::GetAtt': [...] } object
GET_ATT_ERROR_TYPES = [
    "any.required",
    "any.empty",
    "any.allowOnly",
    "array.base",
    "array.min",
    "array.max",
    "string.base",
]

string_or_ref = {"alternatives": [non_empty_string, ref_schema]}


def string_or_get_att(property_name, attribute_name):
    message = (
        f"\"{property_name}\" must be in the format "
        f"\"{{ 'Fn::GetAtt': ['<ResourceId>', '{attribute_name}'] }}\""
    )
    get_att = {
        "type": "object",
        "properties": {
            "Fn::GetAtt": {
                "type": "array",
                "minItems": 2,
                "maxItems": 2,
                "items": [non_empty_string, {"enum": [attribute_name]}],
            }
        },
        "required": ["Fn::GetAtt"],
        "additionalProperties": False,
    }
    return {
        "alternatives": [
            non_empty_string,
            with_errors(
                get_att,
                custom_multiple_error_builder({kind: message for kind in GET_ATT_ERROR_TYPES}),
            ),
        ]
    }


def _param_key(params, message, required=()):
    properties = {param: non_empty_string for param in params}
    for name in required:
        properties[name] = non_empty_string
    return {
        "alternatives": [
            non_empty_string,
            with_errors(
                {
                    "type": "object",
                    "properties": properties,
                    "required": list(required),
                    "additionalProperties": False,
                    "xor": list(params),
                },
                custom_error_builder("object.xor", message),
            ),
        ]
    }


key = _param_key(
    ["pathParam", "queryStringParam"],
    'key must contain "pathParam" or "queryStringParam" but not both',
)

partition_key = _param_key(
    ["pathParam", "queryStringParam", "bodyParam"],
    'key must contain "pathParam" or "queryStringParam" or "bodyParam" and only one',
)

dynamodb_default_key_scheme = _param_key(
    ["pathParam", "queryStringParam"],
    'key must contain "pathParam" or "queryStringParam" and only one',
    required=["attributeType"],
)
