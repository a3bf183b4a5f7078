#Copyright (c) 2024 Vanderbilt University
#Authors: Jules White, Allen Karns, Karely Rodriguez, Max Moundas

import copy
import unittest

from common.errors import ProxyConfigError
from common.validate import (
    is_valid,
    validate_proxies,
    validate_proxy,
    validate_service_proxies,
)
from schemata.dynamodb_schema import ACTION_REQUIRED_MESSAGE, HASH_KEY_REQUIRED_MESSAGE

SUPPORTED = "kinesis, s3, sns, sqs, dynamodb"

PROXIES = [
    {"kinesis": {"path": "/kinesis", "method": "post", "streamName": {"Ref": "YourStream"}}},
    {
        "s3": {
            "path": "/s3",
            "method": "get",
            "action": "GetObject",
            "bucket": {"Ref": "S3Bucket"},
            "key": {"pathParam": "fileName"},
        }
    },
    {"sns": {"path": "/sns", "method": "post", "topicName": {"Fn::GetAtt": ["SNSTopic", "TopicName"]}}},
    {"sqs": {"path": "/sqs", "method": "post", "queueName": {"Fn::GetAtt": ["SQSQueue", "QueueName"]}}},
    {"dynamodb": {"path": "/dynamodb", "method": "post", "tableName": {"Ref": "YourTable"}, "hashKey": "id"}},
]


class TestValidateProxies(unittest.TestCase):

    def test_all_proxy_kinds(self):
        self.assertEqual(validate_proxies(PROXIES), [])
        self.assertTrue(is_valid(PROXIES))

    def test_tuple_of_proxies(self):
        self.assertEqual(validate_proxies(tuple(PROXIES)), [])

    def test_empty_list(self):
        self.assertEqual(validate_proxies([]), [])

    def test_must_be_a_list(self):
        self.assertEqual(validate_proxies({"kinesis": {}}), [{
            "type": "array.base",
            "path": "",
            "message": '"value" must be an array',
        }])

    def test_unknown_proxy(self):
        proxies = [{"lambda": {"path": "/lambda", "method": "post"}}]
        self.assertEqual(validate_proxies(proxies), [{
            "type": "array.includes",
            "path": "0",
            "message": f'Invalid APIG proxy "lambda". This plugin supported Proxies are: {SUPPORTED}.',
        }])

    def test_unknown_proxy_name_is_quoted_as_given(self):
        errors = validate_proxies([{"{label}x": {"path": "/x", "method": "post"}}])
        self.assertEqual(
            errors[0]["message"],
            f'Invalid APIG proxy "{{label}}x". This plugin supported Proxies are: {SUPPORTED}.',
        )

    def test_kind_specific_message(self):
        proxies = PROXIES + [{"dynamodb": {"path": "/dynamodb", "method": "post", "tableName": "T"}}]
        self.assertEqual(validate_proxies(proxies), [{
            "type": "array.includes",
            "path": "5",
            "message": HASH_KEY_REQUIRED_MESSAGE,
        }])

    def test_action_required_message(self):
        proxies = [{"dynamodb": {"path": "/dynamodb", "method": "options", "tableName": "T"}}]
        self.assertEqual(validate_proxies(proxies)[0]["message"], ACTION_REQUIRED_MESSAGE)

        proxies[0]["dynamodb"]["action"] = "GetItem"
        self.assertEqual(validate_proxies(proxies), [])

    def test_all_violations_in_message(self):
        proxies = [{"kinesis": {"method": "post", "cors": {"origin": "*", "origins": ["*"]}}}]
        errors = validate_proxies(proxies)
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0]["message"], ". ".join([
            '"cors" can have "origin" or "origins" but not both',
            '"path" is required',
            '"streamName" is required',
        ]))

    def test_one_error_per_invalid_entry(self):
        proxies = [
            {"sqs": {"path": "/sqs", "method": "post"}},
            PROXIES[0],
            {"s3": {"path": "/s3", "method": "post", "action": "PutObject", "bucket": "b"}},
        ]
        errors = validate_proxies(proxies)
        self.assertEqual([(e["type"], e["path"]) for e in errors],
                         [("array.includes", "0"), ("array.includes", "2")])
        self.assertEqual(errors[0]["message"], '"queueName" is required')
        self.assertEqual(errors[1]["message"], '"key" is required')

    def test_multiple_proxy_kinds_in_one_entry(self):
        entry = dict(PROXIES[0], **PROXIES[1])
        errors = validate_proxies([entry])
        self.assertEqual(errors, [{
            "type": "array.includes",
            "path": "0",
            "message": 'Invalid APIG proxy entry with multiple proxies "kinesis", "s3". '
                       f"Each entry must define exactly one of: {SUPPORTED}.",
        }])

    def test_entry_without_proxy(self):
        expected = f"Invalid APIG proxy entry. Each entry must define exactly one of: {SUPPORTED}."
        for entry in [{}, "kinesis", None, ["kinesis"]]:
            errors = validate_proxies([entry])
            self.assertEqual(errors, [{"type": "array.includes", "path": "0", "message": expected}],
                             repr(entry))

    def test_same_result_twice(self):
        proxies = [
            {"sqs": {"path": "/sqs", "method": "post", "queueName": {"Fn::GetAtt": ["Q", "Arn"]}}},
            {"kinesis": {"path": "", "method": "fetch"}},
        ]
        self.assertEqual(validate_proxies(proxies), validate_proxies(proxies))

    def test_input_is_not_modified(self):
        proxies = [{"kinesis": {"method": "post", "cors": {"origin": "*", "origins": ["*"]}}}]
        snapshot = copy.deepcopy(proxies)
        validate_proxies(proxies)
        self.assertEqual(proxies, snapshot)


class TestValidateProxy(unittest.TestCase):

    def test_reports_each_field(self):
        errors = validate_proxy("kinesis", {"method": "fetch"})
        self.assertEqual([(e["type"], e["path"]) for e in errors], [
            ("any.allowOnly", "kinesis.method"),
            ("any.required", "kinesis.path"),
            ("any.required", "kinesis.streamName"),
        ])

    def test_unknown_kind(self):
        self.assertEqual(validate_proxy("lambda", {}), [{
            "type": "array.includes",
            "path": "",
            "message": f'Invalid APIG proxy "lambda". This plugin supported Proxies are: {SUPPORTED}.',
        }])

    def test_body_must_be_an_object(self):
        errors = validate_proxy("sqs", None)
        self.assertEqual(errors, [{
            "type": "object.base",
            "path": "sqs",
            "message": '"sqs" must be an object',
        }])


class TestValidateServiceProxies(unittest.TestCase):

    def test_returns_valid_proxies(self):
        self.assertIs(validate_service_proxies(PROXIES), PROXIES)

    def test_raises_with_errors(self):
        proxies = [{"xxxxx": {"path": "/kinesis", "method": "post"}}]
        with self.assertRaises(ProxyConfigError) as context:
            validate_service_proxies(proxies)
        self.assertEqual(len(context.exception.errors), 1)
        self.assertEqual(
            str(context.exception),
            f'Invalid APIG proxy "xxxxx". This plugin supported Proxies are: {SUPPORTED}.',
        )


if __name__ == "__main__":
    unittest.main()
