#Copyright (c) 2024 Vanderbilt University
#Authors: Jules White, Allen Karns, Karely Rodriguez, Max Moundas

import logging

from common.errors import (
    ProxyConfigError,
    custom_error_builder,
    format_error,
    format_message,
    with_errors,
)
from common.keywords import ProxySchemaValidator
from schemata.schema_validation_rules import allowed_proxies, rules

logger = logging.getLogger("proxy_validation")

proxies_schemas = rules["proxies"]

SUPPORTED_PROXIES = ", ".join(allowed_proxies)


def _unknown_proxy_message(proxy_key):
    return (
        f'Invalid APIG proxy "{proxy_key}". '
        f"This plugin supported Proxies are: {SUPPORTED_PROXIES}."
    )


def _kind_errors(entry, kind):
    validator = ProxySchemaValidator(proxies_schemas[kind])
    return list(validator.iter_errors(entry))


def describe_proxy_mismatch(error):
    """
    Explain why a proxy entry did not match any of the allowed proxy schemas.

    The default wording is '"value" at position <i> does not match any of the
    allowed types'; instead the entry is validated again against the schema
    of the proxy it names so the message points at the failing field.
    """
    entry = error.instance
    keys = list(entry) if isinstance(entry, dict) else []

    if len(keys) == 1:
        proxy_key = keys[0]
        if proxy_key in proxies_schemas:
            # e.g. entry is { kinesis: { path: '/kinesis', method: 'xxxx' } }
            return ". ".join(format_message(e) for e in _kind_errors(entry, proxy_key))
        # e.g. entry is { xxxxx: { path: '/kinesis', method: 'post' } }
        return _unknown_proxy_message(proxy_key)

    if len(keys) > 1:
        names = ", ".join(f'"{key}"' for key in keys)
        return (
            f"Invalid APIG proxy entry with multiple proxies {names}. "
            f"Each entry must define exactly one of: {SUPPORTED_PROXIES}."
        )

    return f"Invalid APIG proxy entry. Each entry must define exactly one of: {SUPPORTED_PROXIES}."


proxies_schema = with_errors(
    {
        "type": "array",
        "itemsAnyOf": [proxies_schemas[kind] for kind in allowed_proxies],
    },
    custom_error_builder("array.includes", describe_proxy_mismatch),
)


def validate_proxies(proxies):
    """
    Validate a list of APIG service proxy definitions.

    :param proxies: decoded proxy list or tuple, e.g. the custom.apiGatewayServiceProxies
        section of serverless.yml
    :return: list of {"type", "path", "message"} dicts, empty when valid
    """
    validator = ProxySchemaValidator(proxies_schema)
    errors = [format_error(error) for error in validator.iter_errors(proxies)]
    logger.debug("Validated %d proxies", len(proxies) if isinstance(proxies, (list, tuple)) else 0)
    if errors:
        logger.info("Found %d invalid proxy definitions", len(errors))
    return errors


def is_valid(proxies):
    return not validate_proxies(proxies)


def validate_proxy(kind, config):
    """
    Validate a single proxy body against the rules of its kind only.

    Unlike validate_proxies, every failing field is reported as its own error
    with a path relative to the entry, e.g. "dynamodb.hashKey".
    """
    if kind not in proxies_schemas:
        return [
            {
                "type": "array.includes",
                "path": "",
                "message": _unknown_proxy_message(kind),
            }
        ]
    return [format_error(error) for error in _kind_errors({kind: config}, kind)]


def validate_service_proxies(proxies):
    errors = validate_proxies(proxies)
    if errors:
        raise ProxyConfigError(errors)
    return proxies
