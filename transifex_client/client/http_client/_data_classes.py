from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, JsonValue, TypeAdapter, ValidationError

from transifex_client.exceptions import TransifexAPIError, TransifexTransportError

JSON_API_MEDIA_TYPE = "application/vnd.api+json"


class HTTPResult(BaseModel):
    def get_response_or_raise(self) -> "ResponseMessage":
        """Return the response, or raise if the request never got one."""
        if isinstance(self, ResponseMessage):
            return self
        elif isinstance(self, FailedRequest):
            raise TransifexTransportError(f"Request failed with error: {self.error}")
        else:
            raise TransifexTransportError(f"Unknown {type(self).__name__} type")


class FailedRequest(HTTPResult):
    error: str


class ErrorDetails(BaseModel):
    """A single JSON:API error object."""

    model_config = ConfigDict(extra="allow")

    status: str | None = None
    code: str | None = None
    title: str | None = None
    detail: str | None = None
    source: dict[str, JsonValue] | None = None

    @property
    def message(self) -> str:
        return self.detail or self.title or self.code or "Unknown error"


class ErrorDocument(BaseModel):
    errors: list[ErrorDetails] = Field(min_length=1)


class ResponseMessage(HTTPResult):
    """Any HTTP response received from the service, regardless of status code."""

    status_code: int
    body: str
    content: bytes

    @property
    def body_json(self) -> dict[str, Any]:
        """Parse the response body as JSON."""
        return TypeAdapter(dict[str, JsonValue]).validate_json(self.body)

    def error_document(self) -> ErrorDocument | None:
        """Returns the JSON:API error document in the body, if the body is one."""
        try:
            return ErrorDocument.model_validate_json(self.body)
        except ValidationError:
            return None

    def raise_if_error_document(self) -> None:
        if (document := self.error_document()) is None:
            return None
        messages = "; ".join(error.message for error in document.errors)
        raise TransifexAPIError(
            f"Request failed with status code {self.status_code}: {messages}",
            status_code=self.status_code,
            errors=document.errors,
            body=self.body,
        )


class RequestMessage(BaseModel):
    endpoint_url: str
    method: Literal["GET"] = "GET"
    accept: str = JSON_API_MEDIA_TYPE
