"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for request and response bodies exchanged with the web frontend.

    Fields are snake_case in Python and camelCase on the wire. Input is
    accepted in either form.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CallerIdentity(BaseModel):
    """
    The verified identity behind a bearer credential.

    Produced by the credential verifier and made available to route
    handlers via dependency injection. Only the subject is guaranteed:
    self-issued tokens carry nothing else.
    """

    subject: str = Field(..., description="User ID of the caller")
    source: str = Field(..., description="Which trust source verified the token")

    model_config = {"frozen": True}

    @property
    def id(self) -> str:
        """Alias used by route handlers."""
        return self.subject
