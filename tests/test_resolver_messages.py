from conftest import FakeMessageSource

from errorviews.exceptions import ExceptionWrapper
from errorviews.models.config import I18nConfig, ResolverConfig
from errorviews.services.i18n.service import I18nService
from errorviews.services.resolver import DEFAULT_EXCEPTION_MESSAGE_KEY, ExceptionViewResolver

FooException = type("FooException", (Exception,), {"__module__": "com.example"})


def make_resolver(messages: FakeMessageSource) -> ExceptionViewResolver:
    return ExceptionViewResolver(ResolverConfig(), messages)


def test_code_with_own_default_and_no_resource(messages: FakeMessageSource) -> None:
    messages.messages[DEFAULT_EXCEPTION_MESSAGE_KEY] = "global"
    wrapper = ExceptionWrapper("ERR001", "oops")
    assert make_resolver(messages).resolve_friendly_message(wrapper, "en") == "oops"


def test_code_without_defaults_resolves_to_empty_string(messages: FakeMessageSource) -> None:
    wrapper = ExceptionWrapper("ERR001")
    assert make_resolver(messages).resolve_friendly_message(wrapper, "en") == ""


def test_code_without_own_default_uses_global_default(messages: FakeMessageSource) -> None:
    messages.messages[DEFAULT_EXCEPTION_MESSAGE_KEY] = "global"
    wrapper = ExceptionWrapper("ERR001", "   ")
    assert make_resolver(messages).resolve_friendly_message(wrapper, "en") == "global"


def test_code_resource_wins_over_defaults(messages: FakeMessageSource) -> None:
    messages.messages.update({DEFAULT_EXCEPTION_MESSAGE_KEY: "global", "ERR001": "Order {0} failed"})
    wrapper = ExceptionWrapper("ERR001", "oops", message_args=["A-17"])
    assert make_resolver(messages).resolve_friendly_message(wrapper, "en") == "Order A-17 failed"


def test_code_lookup_passes_args_and_locale(messages: FakeMessageSource) -> None:
    wrapper = ExceptionWrapper("ERR001", "oops", message_args=[1, "two"])
    make_resolver(messages).resolve_friendly_message(wrapper, "zh_CN")

    assert messages.lookups == [
        (DEFAULT_EXCEPTION_MESSAGE_KEY, None, "", "zh_CN"),
        ("ERR001", (1, "two"), "oops", "zh_CN"),
    ]


def test_no_code_looks_up_root_cause_class_name(messages: FakeMessageSource) -> None:
    messages.messages.update({DEFAULT_EXCEPTION_MESSAGE_KEY: "global", "com.example.FooException": "Foo happened"})
    wrapper = ExceptionWrapper.wrap(RuntimeError("outer"))
    wrapper.__cause__.__cause__ = FooException()
    assert make_resolver(messages).resolve_friendly_message(wrapper, "en") == "Foo happened"


def test_no_code_ignores_own_default_message(messages: FakeMessageSource) -> None:
    messages.messages[DEFAULT_EXCEPTION_MESSAGE_KEY] = "global"
    wrapper = ExceptionWrapper(None, "never used", cause=FooException())
    assert make_resolver(messages).resolve_friendly_message(wrapper, "en") == "global"
    assert messages.lookups[-1] == ("com.example.FooException", None, "global", "en")


def test_explicit_message_source_overrides_configured_one(messages: FakeMessageSource) -> None:
    other = FakeMessageSource({"ERR001": "from other"})
    wrapper = ExceptionWrapper("ERR001")
    assert make_resolver(messages).resolve_friendly_message(wrapper, "en", other) == "from other"
    assert messages.lookups == []


def test_request_locale_selects_translation() -> None:
    store = I18nService.__new__(I18nService)
    store.fallback_locale = "en"
    store._data = {
        "exception.defaultMessage": {"en": "Something went wrong", "zh": "系统错误"},
        "ERR001": {"en": "Order {0} not found", "zh": "订单 {0} 不存在"},
    }
    resolver = ExceptionViewResolver(ResolverConfig(), store, i18n_config=I18nConfig(default_locale="zh"))

    wrapper = ExceptionWrapper("ERR001", message_args=["A-17"])
    resolver.fill_friendly_message(wrapper, None)
    assert wrapper.friendly_message == "订单 A-17 不存在"

    plain = ExceptionWrapper.wrap(ValueError())
    resolver.fill_friendly_message(plain, None)
    assert plain.friendly_message == "系统错误"
