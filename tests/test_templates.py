"""WhatsApp template management on the Integrations API."""

import json

import pytest

from core import templates
from core.results import InvalidToolInput


BASE = "https://integrations.messagebird.com"


class TestComponents:
    def test_body_only(self):
        assert templates.template_components("Hi {{1}}") == [{"type": "BODY", "text": "Hi {{1}}"}]

    def test_body_examples_are_nested_once(self):
        body = templates.body_component("Hi {{1}}, order {{2}}", ["Ann", "42"])
        assert body["example"] == {"body_text": [["Ann", "42"]]}

    def test_fixed_order(self):
        components = templates.template_components(
            "Body",
            header_type="TEXT",
            header_text="Title",
            footer_text="Footer",
            button_type="QUICK_REPLY",
            button_text="OK",
        )
        assert [c["type"] for c in components] == ["HEADER", "BODY", "FOOTER", "BUTTONS"]
        assert components[0] == {"type": "HEADER", "format": "TEXT", "text": "Title"}
        assert components[3] == {"type": "BUTTONS", "buttons": [{"type": "QUICK_REPLY", "text": "OK"}]}

    def test_media_header_uses_example_url(self):
        header = templates.header_component("IMAGE", header_text="ignored", example_url="https://cdn.test/h.png")
        assert header == {"type": "HEADER", "format": "IMAGE", "example": {"header_url": ["https://cdn.test/h.png"]}}

    def test_button_needs_text(self):
        components = templates.template_components("Body", button_type="URL")
        assert [c["type"] for c in components] == ["BODY"]


class TestButtons:
    def test_phone_number(self):
        assert templates.button("PHONE_NUMBER", "Call us", "+15550100") == {
            "type": "PHONE_NUMBER",
            "text": "Call us",
            "phone_number": "+15550100",
        }

    def test_static_url_has_no_example(self):
        assert templates.button("URL", "Open", "https://shop.test/orders") == {
            "type": "URL",
            "text": "Open",
            "url": "https://shop.test/orders",
        }

    def test_dynamic_url_gets_example(self):
        entry = templates.button("URL", "Track", "https://shop.test/track/{{1}}")
        assert entry["url"] == "https://shop.test/track/{{1}}"
        assert entry["example"] == ["https://shop.test/track/example_value"]

    def test_every_placeholder_replaced(self):
        assert templates.url_example("https://x.test/{{1}}/{{12}}") == "https://x.test/example_value/example_value"


class TestParseComponents:
    def test_valid(self):
        assert templates.parse_components('[{"type": "BODY", "text": "x"}]') == [{"type": "BODY", "text": "x"}]

    @pytest.mark.parametrize("raw", ["not-json", "[{", ""])
    def test_invalid(self, raw):
        with pytest.raises(InvalidToolInput) as info:
            templates.parse_components(raw)
        assert str(info.value) == "Invalid JSON in components parameter"


class TestHandlers:
    async def test_list_templates_query_names(self, client, api):
        await templates.list_templates(client, limit="5", waba_id="w-1", channel_id="c-1")
        assert str(api.last.url) == f"{BASE}/v3/platforms/whatsapp/templates?limit=5&wabaId=w-1&channelId=c-1"

    async def test_get_template(self, client, api):
        await templates.get_template(client, "order_update", "pt_BR")
        assert str(api.last.url) == f"{BASE}/v3/platforms/whatsapp/templates/order_update/pt_BR"

    async def test_create_template(self, client, api):
        await templates.create_template(
            client,
            "order_update",
            "en",
            "UTILITY",
            "Order {{1}} shipped",
            body_examples=["#42"],
            waba_id="w-1",
            allow_category_change=True,
        )

        assert api.last.method == "POST"
        assert str(api.last.url) == f"{BASE}/v2/platforms/whatsapp/templates"
        assert api.last_json() == {
            "name": "order_update",
            "language": "en",
            "category": "UTILITY",
            "components": [
                {"type": "BODY", "text": "Order {{1}} shipped", "example": {"body_text": [["#42"]]}},
            ],
            "wabaId": "w-1",
            "allowCategoryChange": True,
        }

    async def test_update_template(self, client, api):
        await templates.update_template(client, "promo", "en", "w-1", '[{"type": "BODY", "text": "New"}]', "MARKETING")

        assert api.last.method == "PUT"
        assert str(api.last.url) == f"{BASE}/v2/platforms/whatsapp/templates/promo/en"
        assert api.last_json() == {
            "wabaId": "w-1",
            "components": [{"type": "BODY", "text": "New"}],
            "category": "MARKETING",
        }

    async def test_update_with_bad_json_makes_no_request(self, client, api):
        result = await templates.update_template(client, "promo", "en", "w-1", "{broken")

        assert result.is_error
        assert result.text == "Invalid JSON in components parameter"
        assert api.requests == []

    async def test_delete_template_synthesizes_result(self, client, api):
        api.reply(204)

        result = await templates.delete_template(client, "promo")

        assert api.last.method == "DELETE"
        assert str(api.last.url) == f"{BASE}/v3/platforms/whatsapp/templates/promo"
        assert json.loads(result.text) == {"deleted": True, "name": "promo"}

    async def test_delete_template_variant(self, client, api):
        api.reply(204)

        result = await templates.delete_template_variant(client, "promo", "es")

        assert str(api.last.url) == f"{BASE}/v3/platforms/whatsapp/templates/promo/es"
        assert json.loads(result.text) == {"deleted": True, "name": "promo", "language": "es"}

    async def test_delete_failure_is_labelled(self, client, api):
        api.reply(404, {"errors": [{"description": "Template not found"}]})
        result = await templates.delete_template(client, "ghost")
        assert result.text == "Failed to delete template: API error (404): Template not found"
