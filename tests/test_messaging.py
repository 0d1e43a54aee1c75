"""
Outbound message tests.

Verifies:
✔ Every send_* tool posts one envelope to /send
✔ Optional fields are omitted, never sent as null
✔ Audio never carries a caption
✔ Template messages carry params XOR components
✔ Interactive headers: text wins over image
"""

import json

import pytest

from core import messaging
from core.models import ListRow, ListSection, ReplyButton
from core.results import InvalidToolInput


SEND_URL = "https://conversations.messagebird.com/v1/send"


# ─────────────────────────────────────────────────────
# Builders
# ─────────────────────────────────────────────────────


class TestMediaContent:
    @pytest.mark.parametrize("media_type", ["image", "video", "file"])
    def test_caption_kept(self, media_type):
        content = messaging.media_content(media_type, "https://cdn.test/a", "look")
        assert content == {media_type: {"url": "https://cdn.test/a", "caption": "look"}}

    def test_audio_drops_caption(self):
        content = messaging.media_content("audio", "https://cdn.test/a.ogg", "ignored")
        assert content == {"audio": {"url": "https://cdn.test/a.ogg"}}

    def test_empty_caption_dropped(self):
        assert messaging.media_content("image", "https://cdn.test/a", "") == {"image": {"url": "https://cdn.test/a"}}

    def test_unknown_type_rejected(self):
        with pytest.raises(InvalidToolInput):
            messaging.media_content("sticker", "https://cdn.test/a")


class TestTextMessage:
    def test_minimal(self):
        assert messaging.text_message("+1", "chan", "hi") == {
            "to": "+1",
            "from": "chan",
            "type": "text",
            "content": {"text": "hi"},
        }

    def test_optional_fields(self):
        body = messaging.text_message("+1", "chan", "hi", disable_url_preview=False, report_url="https://r.test")
        assert body["content"] == {"text": "hi", "disableUrlPreview": False}
        assert body["reportUrl"] == "https://r.test"


class TestLocationMessage:
    def test_name_and_address_optional(self):
        body = messaging.location_message("+1", "chan", -23.5, -46.6)
        assert body["content"] == {"location": {"latitude": -23.5, "longitude": -46.6}}

    def test_with_name_and_address(self):
        body = messaging.location_message("+1", "chan", 1.0, 2.0, name="HQ", address="Main St")
        assert body["content"]["location"] == {"latitude": 1.0, "longitude": 2.0, "name": "HQ", "address": "Main St"}


class TestHsmContent:
    def _hsm(self, **kwargs):
        return messaging.hsm_content("ns-1", "order_update", "pt_BR", **kwargs)

    def test_language_is_deterministic(self):
        assert self._hsm()["language"] == {"policy": "deterministic", "code": "pt_BR"}

    def test_no_parameters_no_params_key(self):
        hsm = self._hsm()
        assert "params" not in hsm
        assert "components" not in hsm

    def test_plain_parameters_use_params(self):
        hsm = self._hsm(parameters=["John", "Order #123"])
        assert hsm["params"] == [{"default": "John"}, {"default": "Order #123"}]
        assert "components" not in hsm

    def test_media_header_switches_to_components(self):
        hsm = self._hsm(parameters=["John"], header_image_url="https://cdn.test/h.png")
        assert "params" not in hsm
        assert hsm["components"] == [
            {"type": "header", "parameters": [{"type": "image", "image": {"url": "https://cdn.test/h.png"}}]},
            {"type": "body", "parameters": [{"type": "text", "text": "John"}]},
        ]

    def test_header_priority_image_video_document(self):
        hsm = self._hsm(header_video_url="https://cdn.test/v.mp4", header_document_url="https://cdn.test/d.pdf")
        header = hsm["components"][0]
        assert header["parameters"] == [{"type": "video", "video": {"url": "https://cdn.test/v.mp4"}}]

    def test_document_header(self):
        hsm = self._hsm(header_document_url="https://cdn.test/d.pdf")
        assert hsm["components"] == [
            {"type": "header", "parameters": [{"type": "document", "document": {"url": "https://cdn.test/d.pdf"}}]},
        ]

    def test_button_suffix_keeps_body_parameters(self):
        hsm = self._hsm(parameters=["John"], button_url_suffix="abc123")
        assert "params" not in hsm
        assert hsm["components"] == [
            {"type": "body", "parameters": [{"type": "text", "text": "John"}]},
            {"type": "button", "sub_type": "url", "parameters": [{"type": "text", "text": "abc123"}]},
        ]

    def test_full_component_order(self):
        hsm = self._hsm(
            parameters=["a"],
            header_image_url="https://cdn.test/h.png",
            button_url_suffix="x",
        )
        assert [c["type"] for c in hsm["components"]] == ["header", "body", "button"]


class TestInteractive:
    buttons = [ReplyButton("yes", "Yes"), ReplyButton("no", "No")]

    def test_buttons_payload(self):
        interactive = messaging.buttons_interactive("Continue?", self.buttons)
        assert interactive == {
            "type": "button",
            "body": {"text": "Continue?"},
            "action": {
                "buttons": [
                    {"id": "yes", "type": "reply", "title": "Yes"},
                    {"id": "no", "type": "reply", "title": "No"},
                ]
            },
        }

    def test_text_header_wins_over_image(self):
        interactive = messaging.buttons_interactive(
            "Continue?", self.buttons, header_text="Hello", header_image_url="https://cdn.test/h.png"
        )
        assert interactive["header"] == {"type": "text", "text": "Hello"}

    def test_image_header_and_footer(self):
        interactive = messaging.buttons_interactive(
            "Continue?", self.buttons, header_image_url="https://cdn.test/h.png", footer_text="bye"
        )
        assert interactive["header"] == {"type": "image", "image": {"url": "https://cdn.test/h.png"}}
        assert interactive["footer"] == {"text": "bye"}

    def test_list_payload(self):
        sections = [
            ListSection("Pizzas", [ListRow("p1", "Margherita", "Tomato & basil"), ListRow("p2", "Pepperoni")]),
        ]
        interactive = messaging.list_interactive("Pick one", "Menu", sections, header_text="Hungry?")
        assert interactive["type"] == "list"
        assert interactive["header"] == {"type": "text", "text": "Hungry?"}
        assert "footer" not in interactive
        assert interactive["action"] == {
            "button": "Menu",
            "sections": [
                {
                    "title": "Pizzas",
                    "rows": [
                        {"id": "p1", "title": "Margherita", "description": "Tomato & basil"},
                        {"id": "p2", "title": "Pepperoni"},
                    ],
                }
            ],
        }


# ─────────────────────────────────────────────────────
# Handlers against a faked API
# ─────────────────────────────────────────────────────


class TestSendHandlers:
    async def test_send_text(self, client, api):
        api.reply(202, {"id": "m1", "status": "accepted"})

        result = await messaging.send_text(client, "+5511999999999", "chan-1", "Hello")

        assert not result.is_error
        assert json.loads(result.text) == {"id": "m1", "status": "accepted"}
        assert len(api.requests) == 1
        assert api.last.method == "POST"
        assert str(api.last.url) == SEND_URL
        assert api.last_json() == {
            "to": "+5511999999999",
            "from": "chan-1",
            "type": "text",
            "content": {"text": "Hello"},
        }

    async def test_send_media_audio(self, client, api):
        await messaging.send_media(client, "+1", "chan", "audio", "https://cdn.test/a.ogg", "caption")
        assert api.last_json()["type"] == "audio"
        assert api.last_json()["content"] == {"audio": {"url": "https://cdn.test/a.ogg"}}

    async def test_send_location(self, client, api):
        await messaging.send_location(client, "+1", "chan", 10.5, 20.25, name="Office")
        assert api.last_json()["content"] == {"location": {"latitude": 10.5, "longitude": 20.25, "name": "Office"}}

    async def test_send_template(self, client, api):
        await messaging.send_template(client, "+1", "chan", "ns", "welcome", "en", parameters=["Ann"])
        body = api.last_json()
        assert body["type"] == "hsm"
        assert body["content"]["hsm"]["params"] == [{"default": "Ann"}]

    async def test_send_interactive_list(self, client, api):
        sections = [ListSection("S", [ListRow("r1", "Row")])]
        await messaging.send_interactive_list(client, "+1", "chan", "Body", "Open", sections, footer_text="f")
        body = api.last_json()
        assert body["type"] == "interactive"
        assert body["content"]["interactive"]["footer"] == {"text": "f"}

    async def test_api_error_is_labelled(self, client, api):
        api.reply(400, {"errors": [{"code": 2, "description": "Invalid channel"}]})

        result = await messaging.send_interactive_buttons(
            client, "+1", "bad-chan", "Body", [ReplyButton("a", "A")]
        )

        assert result.is_error
        assert result.text == "Failed to send interactive buttons: API error (400): Invalid channel"

    async def test_rate_limit_is_labelled(self, client, api):
        api.reply(429, content=b"")
        result = await messaging.send_text(client, "+1", "chan", "hi")
        assert result.text == "Failed to send text message: rate limit exceeded, try again shortly."
