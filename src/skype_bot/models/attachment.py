"""
Attachment models: upload request, stored attachment description and upload response.
"""

import re
from typing import Any, Optional

from skype_bot import validation as v
from skype_bot.models import limits
from skype_bot.models.base import ModelBase, build
from skype_bot.models.enums import AttachmentType, AttachmentViewType

BASE64_PATTERN = re.compile(r"([0-9a-zA-Z+/]{4})*(([0-9a-zA-Z+/]{2}==)|([0-9a-zA-Z+/]{3}=))?")


def is_base64(value: str) -> bool:
    return BASE64_PATTERN.fullmatch(value) is not None


class AttachmentViewInfo(ModelBase):
    view_id: Optional[AttachmentViewType] = None
    size: Optional[int] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_enum(context, self.view_id, AttachmentViewType, "AttachmentViewInfo.viewId")
        errors += v.validate_optional_number(context, self.size, "AttachmentViewInfo.size")
        return errors


class AttachmentInfo(ModelBase):
    """GET /v2/attachments/{id} response."""

    type: Optional[AttachmentType] = None
    name: Optional[str] = None
    views: Optional[list[AttachmentViewInfo]] = None

    @classmethod
    def nested_fields(cls):
        return {"views": build(AttachmentViewInfo)}

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_enum(context, self.type, AttachmentType, "AttachmentInfo.type")
        errors += v.validate_optional_string(context, self.name, "AttachmentInfo.name")
        errors += v.validate_typed_object_array(
            context, self.views, AttachmentViewInfo, "AttachmentInfo.views", "AttachmentViewInfo"
        )
        return errors


class Attachment(ModelBase):
    """Outbound attachment upload. Binary content travels base64-encoded."""

    original_base64: Optional[str] = None
    thumbnail_base64: Optional[str] = None
    type: Optional[AttachmentType] = None
    name: Optional[str] = None

    def approximate_size(self) -> int:
        """Sum of the string fields; close to the serialized size for large payloads."""
        return sum(
            len(value)
            for value in (self.thumbnail_base64, self.original_base64, self.name, self.type)
            if isinstance(value, str)
        )

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_string(context, self.original_base64, "Attachment.originalBase64")
        errors += v.validate_optional_string(context, self.thumbnail_base64, "Attachment.thumbnailBase64")
        errors += v.validate_optional_string(context, self.name, "Attachment.name")
        errors += v.validate_enum(context, self.type, AttachmentType, "Attachment.type")

        if isinstance(self.original_base64, str) and not is_base64(self.original_base64):
            errors.append("Attachment.originalBase64 is not a valid base64-encoded string")
        if isinstance(self.thumbnail_base64, str) and not is_base64(self.thumbnail_base64):
            errors.append("Attachment.thumbnailBase64 is not a valid base64-encoded string")

        size = self.approximate_size()
        if size > limits.ATTACHMENT_REQUEST_SIZE_BYTES.max:
            errors.append(
                f"Total size of attachment request {size} exceeds maximum limit size of "
                f"{limits.ATTACHMENT_REQUEST_SIZE_BYTES.max} bytes"
            )
        return errors


class AttachmentResponse(ModelBase):
    attachment_id: Optional[str] = None
    activity_id: Optional[str] = None

    def validate(self, context: Any = None) -> list[str]:
        errors = v.validate_string(context, self.attachment_id, "AttachmentResponse.attachmentId")
        errors += v.validate_optional_string(context, self.activity_id, "AttachmentResponse.activityId")
        return errors
