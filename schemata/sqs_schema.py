#Copyright (c) 2024 Vanderbilt University
#Authors: Jules White, Allen Karns, Karely Rodriguez, Max Moundas

from schemata.common_schema import entry_schema, non_empty_string, proxy_schema
from schemata.key_schemas import string_or_get_att

# e.g. { "integration.request.querystring.Action": "'SendMessage'" }
request_parameters_schema = {
    "type": "object",
    "additionalProperties": non_empty_string,
}

sqs_schema = entry_schema(
    "sqs",
    proxy_schema(
        {
            "queueName": string_or_get_att("queueName", "QueueName"),
            "requestParameters": request_parameters_schema,
        },
        required=["queueName"],
    ),
)
