import json


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def error_response(status_code: int, message: str, details: list | None = None) -> dict:
    """エラーレスポンスを生成する（details は省略可）"""
    body: dict = {"status": "error", "message": message}
    if details:
        body["details"] = details
    return api_response(status_code, body)
