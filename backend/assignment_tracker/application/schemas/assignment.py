"""Pydantic DTOs (Data Transfer Objects) for the Assignment feature.

Wire names are camelCase (``dueDate``); Python attributes are snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field


class AssignmentCreate(BaseModel):
    """Schema for creating a new assignment.

    Required fields are checked by the service so the error body can name
    the missing field, so every field is optional at the schema level.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(None, examples=["Homework 1"])
    due_date: str | None = Field(None, alias="dueDate", examples=["2024-05-01"])
    submitted: bool | None = None


class AssignmentUpdate(BaseModel):
    """Schema for updating an assignment — every field overwrites, absent means null."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    due_date: str | None = Field(None, alias="dueDate")
    submitted: bool | None = None


class AssignmentResponse(BaseModel):
    """Schema returned to the client."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    name: str | None
    due_date: str | None = Field(alias="dueDate")
    submitted: bool | None


class AssignmentCount(BaseModel):
    count: int
