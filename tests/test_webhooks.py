"""Webhook classification into events."""

import json

from skype_bot import EventType, WebhookError, process_request_data
from skype_bot import webhooks

BOT_ID = "28:bot"
GROUP = "19:abc@thread.skype"
TIME = "2016-10-19T09:53:35.311Z"


def _activity(kind, to=BOT_ID, **fields):
    return {"activity": kind, "from": "8:alice", "to": to, "time": TIME, **fields}


def _types(events):
    return [event.type for event in events]


class TestConversationUpdate:
    def test_topic_bot_added_member_added(self):
        events = process_request_data(
            BOT_ID,
            [_activity("conversationUpdate", to=GROUP, topicName="Lunch", membersAdded=[BOT_ID, "8:bob"])],
        )
        assert _types(events) == [
            EventType.THREAD_TOPIC_UPDATED,
            EventType.THREAD_BOT_ADDED,
            EventType.THREAD_MEMBER_ADDED,
        ]
        assert all(event.reply_to == GROUP for event in events)
        assert events[0].event_object.topic == "Lunch"
        assert events[1].event_object.targets == [BOT_ID]
        assert events[2].event_object.targets == ["8:bob"]
        assert events[2].event_object.from_ == "8:alice"

    def test_history_before_topic_and_removals_last(self):
        events = process_request_data(
            BOT_ID,
            [
                _activity(
                    "conversationUpdate",
                    to=GROUP,
                    membersRemoved=[BOT_ID],
                    topicName="Lunch",
                    historyDisclosed=False,
                )
            ],
        )
        assert _types(events) == [
            EventType.THREAD_HISTORY_DISCLOSED_UPDATE,
            EventType.THREAD_TOPIC_UPDATED,
            EventType.THREAD_BOT_REMOVED,
        ]
        assert events[0].event_object.history_disclosed is False


class TestContactsMessagesAttachments:
    def test_contact_added_and_removed(self):
        events = process_request_data(
            BOT_ID,
            [
                _activity("contactRelationUpdate", action="add", fromDisplayName="Alice"),
                _activity("contactRelationUpdate", action="remove"),
            ],
        )
        assert _types(events) == [EventType.CONTACT_ADDED, EventType.CONTACT_REMOVED]
        assert events[0].reply_to == "8:alice"
        assert events[0].event_object.from_display_name == "Alice"
        assert events[0].event_object.action == "add"

    def test_message(self):
        events = process_request_data(BOT_ID, [_activity("message", id="m1", content="hello")])
        assert _types(events) == [EventType.MESSAGE]
        assert events[0].reply_to is None
        assert events[0].event_object.content == "hello"
        assert events[0].event_object.message_id == "m1"

    def test_attachment_in_group_replies_to_group(self):
        views = [{"viewId": "original", "size": 1024}, {"viewId": "thumbnail", "size": 64}]
        events = process_request_data(
            BOT_ID, [_activity("attachment", to=GROUP, id="a1", type="Image", name="cat.png", views=views)]
        )
        assert _types(events) == [EventType.ATTACHMENT]
        assert events[0].reply_to == GROUP
        assert events[0].event_object.id == "a1"
        assert len(events[0].event_object.views) == 2

    def test_attachment_one_to_one_replies_to_sender(self):
        views = [{"viewId": "original", "size": 1024}]
        events = process_request_data(BOT_ID, [_activity("attachment", id="a1", type="Video", views=views)])
        assert events[0].reply_to == "8:alice"


class TestInput:
    def test_accepts_serialized_body(self):
        body = json.dumps([_activity("message", id="m1", content="hello")])
        assert _types(process_request_data(BOT_ID, body)) == [EventType.MESSAGE]
        assert _types(process_request_data(BOT_ID, body.encode("utf-8"))) == [EventType.MESSAGE]

    def test_keeps_activity_order(self):
        events = process_request_data(
            BOT_ID,
            [
                _activity("message", id="m1", content="first"),
                _activity("contactRelationUpdate", action="add"),
                _activity("message", id="m2", content="second"),
            ],
        )
        assert _types(events) == [EventType.MESSAGE, EventType.CONTACT_ADDED, EventType.MESSAGE]
        assert events[2].event_object.content == "second"


class TestErrors:
    def test_bad_json(self):
        events = process_request_data(BOT_ID, "not json")
        assert len(events) == 1
        assert events[0].is_error
        assert isinstance(events[0].event_object, WebhookError)
        assert events[0].event_object.message.startswith("Incoming webhooks request could not be parsed")

    def test_not_an_array(self):
        events = process_request_data(BOT_ID, {"activity": "message"})
        assert len(events) == 1
        assert "the input data is not an array" in events[0].event_object.message

    def test_unknown_activity(self):
        events = process_request_data(BOT_ID, [_activity("typing")])
        assert _types(events) == [EventType.ERROR]
        assert "Unsupported typing activity type" in events[0].event_object.message

    def test_invalid_activity_rejects_whole_request(self):
        events = process_request_data(
            BOT_ID, [_activity("message", id="m1", content="ok"), _activity("message", id="m2")]
        )
        assert len(events) == 1
        assert events[0].event_object.message.startswith(
            "Incoming webhooks request was invalid, errors: IncomingMessage.content must not be null"
        )

    def test_conversion_failure_is_isolated(self, monkeypatch):
        def boom(bot_id, activity):
            raise RuntimeError("boom")

        monkeypatch.setitem(webhooks._CONVERTERS, "message", boom)
        events = process_request_data(
            BOT_ID,
            [_activity("message", id="m1", content="hi"), _activity("contactRelationUpdate", action="add")],
        )
        assert _types(events) == [EventType.ERROR, EventType.CONTACT_ADDED]
        assert events[0].event_object.message == "failed to convert message to an event, error: boom"
        assert events[0].event_object.activity == "message"
