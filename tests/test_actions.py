"""Calling actions and their settings."""

import pytest

from skype_bot.errors import ModelConstructionError, UnsupportedTypeError
from skype_bot.models import (
    Answer,
    AnswerAppHostedMedia,
    CollectDigits,
    Hangup,
    Participant,
    PlaceCall,
    PlayPrompt,
    Prompt,
    RecognitionOption,
    Recognize,
    Record,
    Transfer,
    VideoSubscription,
    instantiate_action,
)
from skype_bot.models.enums import ModalityType, VideoSubscriptionMode


class TestPrompt:
    def test_text(self):
        assert Prompt(value="Welcome!").validate() == []

    def test_nothing_to_play(self):
        assert Prompt().validate() == ["Neither Prompt.fileUri, Prompt.value or valid silence period are specified"]
        assert Prompt(value="   ").validate() == [
            "Neither Prompt.fileUri, Prompt.value or valid silence period are specified"
        ]

    def test_text_and_file(self):
        errors = Prompt(value="hi", file_uri="https://example.com/hi.wav").validate()
        assert errors == ["Prompt.fileUri and Prompt.value must not be specified at the same time"]

    def test_silence_with_text(self):
        errors = Prompt(value="hi", silence_length_in_milli_seconds=500).validate()
        assert errors == [
            "Prompt.silenceLengthInMilliSeconds must not be specified together with Prompt.fileUri or Prompt.value"
        ]

    def test_silence_with_file(self):
        errors = Prompt(file_uri="https://example.com/hi.wav", silence_length_in_milli_seconds=500).validate()
        assert errors == [
            "Prompt.silenceLengthInMilliSeconds must not be specified together with Prompt.fileUri or Prompt.value"
        ]

    def test_non_string_value_with_file(self):
        errors = Prompt.populate({"value": 123, "fileUri": "https://example.com/hi.wav"}).validate()
        assert errors == [
            "Prompt.fileUri and Prompt.value must not be specified at the same time",
            "Prompt.value is not a string",
        ]

    def test_non_string_value_alone(self):
        assert Prompt.populate({"value": 123}).validate() == ["Prompt.value is not a string"]

    def test_populate_copies_instance(self):
        prompt = Prompt(value="hi")
        copy = Prompt.populate(prompt)
        assert copy is not prompt
        assert copy == prompt
        copy.value = "bye"
        assert prompt.value == "hi"

    def test_silence_limit(self):
        assert Prompt(silence_length_in_milli_seconds=60000).validate() == []
        assert Prompt(silence_length_in_milli_seconds=61000).validate() == [
            "Prompt.silenceLengthInMilliSeconds value 61000 is more than allowed maximum 60000"
        ]

    def test_text_length(self):
        errors = Prompt(value="x" * 2049).validate()
        assert errors == ["Prompt.value length 2049 is more than allowed maximum 2048"]


class TestSimpleActions:
    def test_answer_defaults_to_audio(self):
        answer = Answer(operation_id="1")
        assert answer.validate() == []
        assert answer.to_dict() == {"operationId": "1", "action": "answer", "acceptModalityTypes": ["audio"]}

    def test_answer_forbidden_modality(self):
        errors = Answer(operation_id="1", accept_modality_types=[ModalityType.UNKNOWN]).validate()
        assert errors == ["Answer.acceptModalityTypes must not contain value unknown"]

    def test_operation_id_required(self):
        assert Hangup().validate() == ["ActionBase.operationId must not be null"]

    def test_wrong_tag(self):
        errors = Hangup.populate({"operationId": "1", "action": "answer"}).validate()
        assert errors == ["Hangup.action is set to invalid value answer"]

    def test_stand_alone_flag_stays_local(self):
        answer = Answer(operation_id="1", is_stand_alone_action=True)
        assert "isStandAloneAction" not in answer.to_dict()

    def test_app_hosted_media_needs_configuration(self):
        errors = AnswerAppHostedMedia(operation_id="1").validate()
        assert errors == ["AnswerAppHostedMedia.mediaConfiguration must not be null"]

    def test_app_hosted_media_configuration_size(self):
        action = AnswerAppHostedMedia(operation_id="1", media_configuration={"token": "x" * 1100})
        assert action.validate() == [
            "AnswerAppHostedMedia.mediaConfiguration exceeds after JSON serialization the maximum allowed length of 1024"
        ]

    def test_play_prompt_reports_prompt_errors(self):
        action = PlayPrompt(operation_id="1", prompts=[Prompt(value="hi"), Prompt()])
        assert action.validate() == ["Neither Prompt.fileUri, Prompt.value or valid silence period are specified"]


class TestPlaceCallAndTransfer:
    def test_place_call(self):
        action = PlaceCall(
            operation_id="1",
            source=Participant(identity="28:bot", originator=True),
            target=Participant(identity="8:alice"),
            app_id="app",
        )
        assert action.validate() == []

    def test_place_call_originator_flags(self):
        action = PlaceCall(
            operation_id="1",
            source=Participant(identity="28:bot"),
            target=Participant(identity="8:alice", originator=True),
            app_id="app",
        )
        assert action.validate() == [
            "PlaceCall.source must have set originator to true",
            "PlaceCall.target must have set originator to false",
        ]

    def test_transfer_to_user(self):
        assert Transfer(operation_id="1", target=Participant(identity="8:bob")).validate() == []

    def test_transfer_target_identity(self):
        errors = Transfer(operation_id="1", target=Participant(identity="bob")).validate()
        assert errors == ["Transfer.target identity must be user skype id, i.e. in form 8:<id>"]

    def test_transfer_without_target(self):
        assert Transfer(operation_id="1").validate() == ["Transfer.target is null"]


class TestRecognize:
    def test_menu(self):
        action = Recognize(
            operation_id="1",
            choices=[
                RecognitionOption(name="yes", dtmf_variation="1", speech_variation=["yes", "yeah"]),
                RecognitionOption(name="no", dtmf_variation="2", speech_variation=["no"]),
            ],
        )
        assert action.validate() == []

    def test_dtmf_choices_unique_across_options(self):
        action = Recognize(
            operation_id="1",
            choices=[RecognitionOption(name="yes", dtmf_variation="1"), RecognitionOption(name="no", dtmf_variation="1")],
        )
        assert action.validate() == ["Some dtmfs choices in the Recognize.choices are not unique"]

    def test_speech_choices_unique_across_options(self):
        action = Recognize(
            operation_id="1",
            choices=[
                RecognitionOption(name="yes", speech_variation=["yes"]),
                RecognitionOption(name="sure", speech_variation=["sure", "yes"]),
            ],
        )
        assert action.validate() == ["Some speech choices in the Recognize.choices are not unique"]

    def test_needs_choices_or_digits(self):
        assert Recognize(operation_id="1").validate() == [
            "Neither Recognize.choices or Recognize.collectDigits is specified"
        ]

    def test_collect_digits_reports_single_error(self):
        action = Recognize(operation_id="1", collect_digits=CollectDigits())
        assert action.validate() == ["Either CollectDigits.maxNumberOfDtmfs or CollectDigits.stopTones must be set"]

    def test_collect_digits_limits(self):
        assert CollectDigits(max_number_of_dtmfs=21).validate() == [
            "CollectDigits.maxNumberOfDtmfs value 21 is more than allowed maximum 20"
        ]
        assert CollectDigits(stop_tones=["#", "X"]).validate() == [
            "Value X in CollectDigits.stopTones item is not valid Dtmfs char"
        ]
        assert CollectDigits(max_number_of_dtmfs=4, stop_tones=["#"]).validate() == []

    def test_option_needs_a_variation(self):
        assert RecognitionOption(name="a").validate() == [
            "Neither RecognitionOption.speechVariation or RecognitionOption.dmftVariation is set"
        ]


class TestRecord:
    def test_defaults(self):
        assert Record(operation_id="1").validate() == []

    def test_stop_tones_limit(self):
        errors = Record(operation_id="1", stop_tones=["1", "2", "3", "4", "5", "6"]).validate()
        assert errors == ["Number of items in Record.stopTones exceeds maximum value 5"]

    def test_duration(self):
        errors = Record.populate({"operationId": "1", "maxDurationInSeconds": 5}).validate()
        assert errors == ["Record.maxDurationInSeconds value 5 is less than allowed minimum 10"]


class TestVideoSubscription:
    def test_manual(self):
        action = VideoSubscription(
            operation_id="1", socket_id=0, participant_identity="8:alice", video_modality=ModalityType.VIDEO
        )
        assert action.validate() == []

    def test_manual_needs_modality(self):
        action = VideoSubscription(operation_id="1", socket_id=0, participant_identity="8:alice")
        assert action.validate() == [
            "VideoSubscription.videoModality cannot be set Unknown with videoSubscriptionMode=Manual"
        ]

    def test_auto(self):
        action = VideoSubscription(operation_id="1", socket_id=1, video_subscription_mode=VideoSubscriptionMode.AUTO)
        assert action.validate() == []

    def test_auto_rejects_participant(self):
        action = VideoSubscription(
            operation_id="1",
            socket_id=1,
            participant_identity="8:alice",
            video_subscription_mode=VideoSubscriptionMode.AUTO,
        )
        assert action.validate() == [
            "VideoSubscription.participantIdentity must not be set with videoSubscriptionMode=Auto"
        ]

    def test_socket_range(self):
        action = VideoSubscription(
            operation_id="1", socket_id=10, participant_identity="8:alice", video_modality=ModalityType.VIDEO
        )
        assert action.validate() == ["VideoSubscription.socketId value 10 is more than allowed maximum 9"]


class TestActionFactory:
    def test_picks_concrete_type(self):
        action = instantiate_action({"action": "playPrompt", "operationId": "1", "prompts": [{"value": "hi"}]})
        assert isinstance(action, PlayPrompt)
        assert isinstance(action.prompts[0], Prompt)
        assert action.validate() == []

    def test_stand_alone_override(self):
        assert instantiate_action({"action": "reject", "operationId": "1"}, is_stand_alone=True).is_stand_alone_action
        assert not instantiate_action({"action": "reject", "operationId": "1"}).is_stand_alone_action

    @pytest.mark.parametrize(
        "data, message",
        [
            (None, "action data are null"),
            ("answer", "Invalid type of the action data"),
            ({"operationId": "1"}, "action attribute in the action data is undefined or null"),
        ],
    )
    def test_malformed_input(self, data, message):
        with pytest.raises(ModelConstructionError) as exc:
            instantiate_action(data)
        assert str(exc.value) == message

    def test_unknown_action(self):
        with pytest.raises(UnsupportedTypeError) as exc:
            instantiate_action({"action": "dance", "operationId": "1"})
        assert str(exc.value) == "Unsupported dance action type in the action data"
