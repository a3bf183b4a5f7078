#Copyright (c) 2024 Vanderbilt University
#Authors: Jules White, Allen Karns, Karely Rodriguez, Max Moundas

from .dynamodb_schema import dynamodb_schema
from .kinesis_schema import kinesis_schema
from .s3_schema import s3_schema
from .sns_schema import sns_schema
from .sqs_schema import sqs_schema

allowed_proxies = ["kinesis", "s3", "sns", "sqs", "dynamodb"]

rules = {
    "proxies": {
        "kinesis": kinesis_schema,
        "s3": s3_schema,
        "sns": sns_schema,
        "sqs": sqs_schema,
        "dynamodb": dynamodb_schema,
    },
}
