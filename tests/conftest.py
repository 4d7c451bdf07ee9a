import os
from dataclasses import dataclass

import pytest

os.environ.setdefault("AWS_DEFAULT_REGION", "eu-central-1")
os.environ.setdefault("TABLE_NAME", "test-table")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "ride-booking-test")


@pytest.fixture
def lambda_context():
    """Lambda コンテキストのスタブ（logger.inject_lambda_context 用）"""

    @dataclass
    class LambdaContext:
        function_name: str = "test"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = "arn:aws:lambda:eu-central-1:123456789012:function:test"
        aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"

    return LambdaContext()


@pytest.fixture
def make_http_event():
    """API Gateway HTTP API (v2) イベントを生成する Factory fixture"""

    def _factory(
        body: str | None = None,
        path_parameters: dict | None = None,
        query_string_parameters: dict | None = None,
    ) -> dict:
        event = {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": "/",
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "requestContext": {
                "accountId": "123456789012",
                "apiId": "api-id",
                "domainName": "example.com",
                "http": {
                    "method": "POST",
                    "path": "/",
                    "protocol": "HTTP/1.1",
                    "sourceIp": "203.0.113.10",
                    "userAgent": "pytest",
                },
                "requestId": "request-id",
                "routeKey": "$default",
                "stage": "$default",
                "time": "12/Mar/2024:19:03:58 +0000",
                "timeEpoch": 1710270238000,
            },
            "isBase64Encoded": False,
        }
        if body is not None:
            event["body"] = body
        if path_parameters is not None:
            event["pathParameters"] = path_parameters
        if query_string_parameters is not None:
            event["queryStringParameters"] = query_string_parameters
        return event

    return _factory
