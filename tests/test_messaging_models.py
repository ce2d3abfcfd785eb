"""Messaging models: inbound activities, outbound activity and attachments."""

import pytest

from skype_bot.errors import ModelConstructionError, UnsupportedTypeError
from skype_bot.models import (
    Activity,
    Attachment,
    AttachmentInfo,
    ConversationUpdate,
    IncomingAttachment,
    IncomingMessage,
    Message,
    WebhookMessage,
    instantiate_incoming_activity,
)
from skype_bot.models.enums import AttachmentType

TIME = "2016-10-19T09:53:35.311Z"


def _activity(kind, **fields):
    return {"activity": kind, "from": "8:alice", "to": "28:bot", "time": TIME, **fields}


class TestIncomingActivities:
    def test_message(self):
        message = IncomingMessage.populate(_activity("message", id="m1", content="hello"))
        assert message.from_ == "8:alice"
        assert message.content == "hello"
        assert message.validate() == []

    def test_unknown_keys_are_ignored(self):
        message = IncomingMessage.populate(_activity("message", id="m1", content="hi", extra={"x": 1}))
        assert message.validate() == []
        assert "extra" not in message.to_dict()

    def test_timestamp_must_be_iso8601(self):
        errors = IncomingMessage.populate({**_activity("message", id="m1", content="hi"), "time": "yesterday"}).validate()
        assert errors == [
            "ActivityIncomingBase.time value yesterday is not a valid timestamp string according to ISO8601"
        ]

    def test_wrong_tag_on_concrete_type(self):
        errors = IncomingMessage.populate(_activity("attachment", id="m1", content="hi")).validate()
        assert errors == ["IncomingMessage.activity is set to invalid value attachment"]

    def test_conversation_update_needs_one_change(self):
        update = ConversationUpdate.populate(_activity("conversationUpdate"))
        assert update.validate() == ["ConversationUpdate is invalid, no optional attribute is set"]

    def test_conversation_update_history_disclosed_false_counts(self):
        update = ConversationUpdate.populate(_activity("conversationUpdate", historyDisclosed=False))
        assert update.validate() == []

    def test_attachment_views(self):
        attachment = IncomingAttachment.populate(
            _activity("attachment", id="a1", type="Image", views=[{"viewId": "original", "size": 10}])
        )
        assert attachment.validate() == []
        assert attachment.views[0].size == 10

    def test_attachment_without_views(self):
        errors = IncomingAttachment.populate(_activity("attachment", id="a1", type="Image")).validate()
        assert errors == ["IncomingAttachment.views is null"]


class TestActivityFactory:
    def test_picks_concrete_type(self):
        activity = instantiate_incoming_activity(_activity("contactRelationUpdate", action="add"))
        assert type(activity).__name__ == "ContactRelationUpdate"

    def test_unknown_activity(self):
        with pytest.raises(UnsupportedTypeError) as exc:
            instantiate_incoming_activity(_activity("typing"))
        assert str(exc.value) == "Unsupported typing activity type in the activity data"

    def test_missing_tag(self):
        with pytest.raises(ModelConstructionError) as exc:
            instantiate_incoming_activity({"from": "8:alice"})
        assert str(exc.value) == "activity attribute in the activity data is undefined or null"

    def test_webhook_message_must_be_array(self):
        with pytest.raises(ModelConstructionError) as exc:
            WebhookMessage.populate({"activity": "message"})
        assert str(exc.value) == "the input data is not an array"

    def test_webhook_message(self):
        message = WebhookMessage.populate([_activity("message", id="m1", content="hi")])
        assert message.validate() == []
        assert WebhookMessage.populate([]).validate() == ["WebhookMessage.activities is empty"]


class TestOutbound:
    def test_activity(self):
        activity = Activity(message=Message(content="hello"))
        assert activity.validate() == []
        assert activity.to_dict() == {"message": {"content": "hello"}}

    def test_activity_without_message(self):
        assert Activity().validate() == ["Activity.message is null"]

    def test_message_size_limit(self):
        errors = Message(content="x" * 1_024_001).validate()
        assert errors == ["Message.content size 1024001 bytes is more than allowed maximum 1024000"]


class TestAttachments:
    def test_valid_upload(self):
        attachment = Attachment(original_base64="aGVsbG8=", type=AttachmentType.IMAGE, name="hello.png")
        assert attachment.validate() == []
        assert attachment.to_dict() == {"originalBase64": "aGVsbG8=", "type": "Image", "name": "hello.png"}

    def test_invalid_base64(self):
        errors = Attachment.model_construct(original_base64="!!!", type=AttachmentType.IMAGE).validate()
        assert errors == ["Attachment.originalBase64 is not a valid base64-encoded string"]

    def test_info_round_trip(self):
        data = {"type": "Image", "name": "cat.png", "views": [{"viewId": "original", "size": 10}]}
        info = AttachmentInfo.populate(data)
        assert info.validate() == []
        assert info.to_dict() == data
