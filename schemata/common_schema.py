#Copyright (c) 2024 Vanderbilt University
#Authors: Jules White, Allen Karns, Karely Rodriguez, Max Moundas

"""
Fields shared by every proxy kind: path, method, cors and the authorization
triple. Kind schemas are built with proxy_schema(), which appends the kind's
own properties to these.
"""

from common.errors import custom_error_builder, with_errors

METHODS = ["get", "post", "put", "patch", "options", "head", "delete", "any"]

AUTHORIZATION_TYPES = ["NONE", "AWS_IAM", "CUSTOM", "COGNITO_USER_POOLS"]

non_empty_string = {"type": "string", "minLength": 1}

string_list = {"type": "array", "items": non_empty_string}

ref_schema = {
    "type": "object",
    "properties": {"Ref": non_empty_string},
    "required": ["Ref"],
    "additionalProperties": False,
}

path_schema = non_empty_string

method_schema = {"type": "string", "enum": METHODS, "insensitive": True}

cors_schema = {
    "alternatives": [
        {"type": "boolean"},
        with_errors(
            {
                "type": "object",
                "properties": {
                    "headers": string_list,
                    "origin": non_empty_string,
                    "origins": string_list,
                    "methods": {"type": "array", "items": method_schema},
                    "maxAge": {"type": "number", "minimum": 1},
                    "cacheControl": non_empty_string,
                    "allowCredentials": {"type": "boolean"},
                },
                "additionalProperties": False,
                # can have one of them, but not required
                "oxor": ["origin", "origins"],
            },
            custom_error_builder(
                "object.oxor", '"cors" can have "origin" or "origins" but not both'
            ),
        ),
    ]
}

authorizer_id_schema = {"alternatives": [non_empty_string, ref_schema]}

authorization_scopes_schema = {"type": "array"}

authorization_type_schema = {
    "if": {
        "properties": {"authorizerId": authorizer_id_schema},
        "required": ["authorizerId"],
    },
    "then": {
        "properties": {"authorizationType": {"type": "string", "enum": ["CUSTOM"]}},
        "required": ["authorizationType"],
    },
    "else": {
        "if": {
            "properties": {"authorizationScopes": authorization_scopes_schema},
            "required": ["authorizationScopes"],
        },
        "then": {
            "properties": {"authorizationType": {"type": "string", "enum": ["COGNITO_USER_POOLS"]}},
            "required": ["authorizationType"],
        },
        "else": {
            "properties": {"authorizationType": {"type": "string", "enum": AUTHORIZATION_TYPES}},
        },
    },
}

common_properties = {
    "path": path_schema,
    "method": method_schema,
    "cors": cors_schema,
    "authorizationType": {},
    "authorizerId": authorizer_id_schema,
    "authorizationScopes": authorization_scopes_schema,
}


def proxy_schema(properties, required=(), rules=()):
    """
    Build the schema of one proxy body.

    :param properties: kind-specific property schemas, appended to the common ones
    :param required: kind-specific required keys
    :param rules: extra conditional schemas evaluated against the whole body
    """
    return {
        "type": "object",
        "properties": {**common_properties, **properties},
        "required": ["path", "method", *required],
        "additionalProperties": False,
        "allOf": [
            with_errors(
                # can have one of them, but not required
                {"oxor": ["authorizerId", "authorizationScopes"]},
                custom_error_builder(
                    "object.oxor", 'cannot set both "authorizerId" and "authorizationScopes"'
                ),
            ),
            authorization_type_schema,
            *rules,
        ],
    }


def entry_schema(kind, body_schema):
    return {
        "type": "object",
        "properties": {kind: body_schema},
        "required": [kind],
        "additionalProperties": False,
    }
