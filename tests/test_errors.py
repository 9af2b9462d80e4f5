from linebot_models.errors import APIError, APIErrorDetail, InvalidSignatureError, LineBotError


def test_invalid_signature_message():
    error = InvalidSignatureError()
    assert str(error) == "invalid signature"
    assert isinstance(error, LineBotError)


def test_api_error_without_response():
    assert str(APIError(500)) == "linebot: APIError 500 "


def test_api_error_with_message():
    assert str(APIError(404, "Not found")) == "linebot: APIError 404 Not found"


def test_api_error_with_details():
    error = APIError(
        400,
        "The request body has 1 error(s)",
        [APIErrorDetail("messages[0].text", "May not be empty")],
    )
    assert str(error) == (
        "linebot: APIError 400 The request body has 1 error(s)"
        "\n[messages[0].text] May not be empty"
    )


def test_api_error_keeps_fields():
    details = [APIErrorDetail("a", "b"), APIErrorDetail("c", "d")]
    error = APIError(429, "limit", details)
    assert error.code == 429
    assert error.message == "limit"
    assert error.details == tuple(details)
    assert str(error).count("\n") == len(details)


def test_api_error_is_catchable_as_base():
    error = APIError(401, "Authentication failed")
    assert isinstance(error, LineBotError)
    assert error.code == 401
    assert str(error) == "linebot: APIError 401 Authentication failed"