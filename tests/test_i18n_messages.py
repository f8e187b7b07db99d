import json
from pathlib import Path

from errorviews.services.i18n.service import I18nService


def make_svc_with(data: dict, fallback_locale: str | None = "en") -> I18nService:
    svc = I18nService.__new__(I18nService)
    svc.fallback_locale = fallback_locale
    svc._data = data
    return svc


def test_flat_key_preferred_over_nested_path():
    svc = make_svc_with(
        {
            "exception.defaultMessage": {"en": "flat"},
            "exception": {"defaultMessage": {"en": "nested"}, "other": {"en": "nested-other"}},
        }
    )
    assert svc.get_message("exception.defaultMessage", locale="en") == "flat"
    assert svc.get_message("exception.other", locale="en") == "nested-other"


def test_locale_falls_back_to_language_then_fallback_locale():
    svc = make_svc_with({"greeting": {"en": "Hello", "zh": "你好", "zh_TW": "您好"}})
    assert svc.get_message("greeting", locale="zh-TW") == "您好"
    assert svc.get_message("greeting", locale="zh_CN") == "你好"
    assert svc.get_message("greeting", locale="fr") == "Hello"


def test_without_fallback_locale_missing_translation_uses_default():
    svc = make_svc_with({"greeting": {"en": "Hello"}}, fallback_locale=None)
    assert svc.get_message("greeting", default="dflt", locale="fr") == "dflt"


def test_plain_string_entry_serves_every_locale():
    svc = make_svc_with({"builtins.TimeoutError": "Timed out"})
    assert svc.get_message("builtins.TimeoutError", locale="zh") == "Timed out"


def test_missing_key_returns_default_or_key():
    svc = make_svc_with({})
    assert svc.get_message("ERR001", default="oops", locale="en") == "oops"
    assert svc.get_message("ERR001", default="", locale="en") == ""
    assert svc.get_message("ERR001", locale="en") == "ERR001"


def test_args_fill_positional_placeholders():
    svc = make_svc_with({"ORDER_NOT_FOUND": {"en": "Order {0} not found in {1}"}})
    assert svc.get_message("ORDER_NOT_FOUND", ["A-17", "Paris"], locale="en") == "Order A-17 not found in Paris"


def test_default_message_is_formatted_with_args():
    svc = make_svc_with({})
    assert svc.get_message("ORDER_NOT_FOUND", ["A-17"], "Order {0} is gone", "en") == "Order A-17 is gone"


def test_bad_template_returns_raw_template_instead_of_raising():
    svc = make_svc_with({"BROKEN": {"en": "Needs {0} and {1}"}, "NAMED": {"en": "Hi {name}"}})
    assert svc.get_message("BROKEN", ["only-one"], locale="en") == "Needs {0} and {1}"
    assert svc.get_message("NAMED", ["x"], locale="en") == "Hi {name}"


def test_no_args_leaves_placeholders_untouched():
    svc = make_svc_with({"TEMPLATE": {"en": "Value {0}"}})
    assert svc.get_message("TEMPLATE", None, locale="en") == "Value {0}"


def test_missing_file_yields_empty_store(tmp_path: Path):
    svc = I18nService(tmp_path / "nope.json")
    assert svc.get_message("exception.defaultMessage", None, "", "en") == ""


def test_invalid_json_yields_empty_store(tmp_path: Path):
    path = tmp_path / "messages.json"
    path.write_text("{not json", encoding="utf-8")
    svc = I18nService(path)
    assert svc.get_message("anything", default="fallback") == "fallback"


def test_reload_picks_up_file_changes(tmp_path: Path):
    path = tmp_path / "messages.json"
    path.write_text(json.dumps({"ERR001": {"en": "first"}}), encoding="utf-8")
    svc = I18nService(path)
    assert svc.get_message("ERR001", locale="en") == "first"

    path.write_text(json.dumps({"ERR001": {"en": "second"}}), encoding="utf-8")
    svc.reload()
    assert svc.get_message("ERR001", locale="en") == "second"


def test_bundled_messages_have_default_message():
    from errorviews.utils.paths import get_messages_file

    svc = I18nService(get_messages_file())
    assert svc.get_message("exception.defaultMessage", None, "", "en") != ""
    assert svc.get_message("exception.defaultMessage", None, "", "zh") != svc.get_message(
        "exception.defaultMessage", None, "", "en"
    )


def test_attribute_and_index_placeholders_on_wrong_args_return_raw_template():
    svc = make_svc_with({"ITEM_MISSING": {"en": "Item {0[1]} missing"}})
    assert svc.get_message("ITEM_MISSING", [5], locale="en") == "Item {0[1]} missing"
    assert svc.get_message("ORDER_FAILED", [17], "Order {0.id} failed", "en") == "Order {0.id} failed"


def test_resolver_survives_unformattable_default_message():
    from errorviews.exceptions import ExceptionWrapper
    from errorviews.models.config import ResolverConfig
    from errorviews.services.resolver import ExceptionViewResolver

    resolver = ExceptionViewResolver(ResolverConfig(default_error_view="errors/general"), make_svc_with({}))
    result = resolver.resolve(None, ExceptionWrapper("ERR001", "Order {0.id} failed", message_args=[17]))
    assert result is not None
    assert result.friendly_message == "Order {0.id} failed"
