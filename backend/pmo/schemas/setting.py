"""PMO: Setting schemas."""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pmo.models.enums import SettingDataType
from pmo.schemas.common import RecordResponse


class SettingFilters(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    group: str | None = Field(None, max_length=100)
    is_public: bool | None = None
    data_type: SettingDataType | None = None
    key: str | None = Field(None, max_length=255)  # partial, case-insensitive


class SettingCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    setting_key: str = Field(min_length=1, max_length=255)
    setting_value: str | None = None
    setting_group: str = Field(min_length=1, max_length=100)
    data_type: SettingDataType = SettingDataType.STRING
    is_public: bool = False
    description: str | None = None
    metadata: dict[str, Any] | None = None


class SettingUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    setting_key: str | None = Field(None, min_length=1, max_length=255)
    setting_value: str | None = None
    setting_group: str | None = Field(None, min_length=1, max_length=100)
    data_type: SettingDataType | None = None
    is_public: bool | None = None
    description: str | None = None
    metadata: dict[str, Any] | None = None


class SettingResponse(RecordResponse):
    setting_key: str
    setting_value: str | None = None
    setting_group: str
    data_type: SettingDataType
    is_public: bool
    description: str | None = None
    metadata: dict[str, Any] | None = None
