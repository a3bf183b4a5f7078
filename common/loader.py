#Copyright (c) 2024 Vanderbilt University
#Authors: Jules White, Allen Karns, Karely Rodriguez, Max Moundas

import logging

import yaml

from common.errors import ConfigLoadError

logger = logging.getLogger("proxy_loader")

DEFAULT_CUSTOM_KEY = "apiGatewayServiceProxies"


# Add CloudFormation intrinsic function support to YAML loader
class CloudFormationLoader(yaml.SafeLoader):
    pass


def construct_ref(loader, node):
    return {"Ref": loader.construct_scalar(node)}


def construct_getatt(loader, node):
    if isinstance(node, yaml.ScalarNode):
        # !GetAtt MyQueue.QueueName
        return {"Fn::GetAtt": loader.construct_scalar(node).split(".", 1)}
    return {"Fn::GetAtt": loader.construct_sequence(node, deep=True)}


def construct_sub(loader, node):
    if isinstance(node, yaml.ScalarNode):
        return {"Fn::Sub": loader.construct_scalar(node)}
    return {"Fn::Sub": loader.construct_sequence(node, deep=True)}


def construct_join(loader, node):
    return {"Fn::Join": loader.construct_sequence(node, deep=True)}


def construct_import_value(loader, node):
    if isinstance(node, yaml.ScalarNode):
        return {"Fn::ImportValue": loader.construct_scalar(node)}
    return {"Fn::ImportValue": loader.construct_mapping(node, deep=True)}


def construct_intrinsic(loader, tag_suffix, node):
    # !If, !Select, !Equals, !Condition and the other short forms
    name = tag_suffix if tag_suffix == "Condition" else f"Fn::{tag_suffix}"
    if isinstance(node, yaml.ScalarNode):
        return {name: loader.construct_scalar(node)}
    if isinstance(node, yaml.SequenceNode):
        return {name: loader.construct_sequence(node, deep=True)}
    return {name: loader.construct_mapping(node, deep=True)}


CloudFormationLoader.add_constructor("!Ref", construct_ref)
CloudFormationLoader.add_constructor("!GetAtt", construct_getatt)
CloudFormationLoader.add_constructor("!Sub", construct_sub)
CloudFormationLoader.add_constructor("!Join", construct_join)
CloudFormationLoader.add_constructor("!ImportValue", construct_import_value)
CloudFormationLoader.add_multi_constructor("!", construct_intrinsic)


def parse_service_config(text):
    try:
        config = yaml.load(text, Loader=CloudFormationLoader)
    except yaml.YAMLError as e:
        logger.error("Failed to parse service configuration: %s", e)
        raise ConfigLoadError(f"Unable to parse service configuration: {e}")
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigLoadError("Service configuration must be a mapping")
    return config


def load_service_config(path):
    try:
        with open(path, "r") as f:
            text = f.read()
    except OSError as e:
        logger.error("Failed to read %s: %s", path, e)
        raise ConfigLoadError(f"Unable to read service configuration {path}: {e}")
    return parse_service_config(text)


def get_service_proxies(config, custom_key=DEFAULT_CUSTOM_KEY):
    """Return the proxy list from custom.<custom_key>, or [] when none are defined."""
    custom = config.get("custom")
    if custom is None:
        return []
    if not isinstance(custom, dict):
        raise ConfigLoadError('"custom" must be a mapping')
    proxies = custom.get(custom_key)
    return [] if proxies is None else proxies


def load_service_proxies(path, custom_key=DEFAULT_CUSTOM_KEY):
    return get_service_proxies(load_service_config(path), custom_key)
