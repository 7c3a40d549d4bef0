"""FallbackTranslator Example - Multi-Locale Fallback Chains.

Demonstrates handling incomplete translations with an ordered chain of
translators, primary locale first.

Scenarios covered:
1. E-commerce site with partial Latvian translations
2. Three-locale chain (lv -> lt -> en) with a fallback callback
3. Errors other than unknown-message are never masked by the fallback

Python 3.13+.
"""

from __future__ import annotations

from tr8n import (
    FallbackInfo,
    FallbackTranslator,
    MessageTable,
    SimpleTranslator,
    TranslationError,
)


def example_1_basic_fallback() -> None:
    """Latvian primary with English fallback."""
    print("=" * 60)
    print("Example 1: Basic Fallback (lv -> en)")
    print("=" * 60)

    lv = MessageTable.from_mapping(
        {
            "welcome": "Laipni lūdzam, %{name}!",
            "cart": {0: "Grozs ir tukšs", 1: "%{count} prece", 2: "%{count} preces"},
        },
        locale="lv",
    )
    en = MessageTable.from_mapping(
        {
            "welcome": "Welcome, %{name}!",
            "cart": {0: "Cart is empty", 1: "One item", 2: "%{count} items"},
            "payment-success": "Payment successful!",
        },
        locale="en",
    )
    l10n = FallbackTranslator([SimpleTranslator(lv), SimpleTranslator(en)])

    print("\nMessages in Latvian:")
    print(f"  welcome: {l10n.translate('welcome', {'name': 'Anna'})}")
    print(f"  cart: {l10n.translate_plural('cart', 3, {'count': '3'})}")

    print("\nMessages falling back to English:")
    print(f"  payment-success: {l10n.translate('payment-success')}")

    print("\nNon-existent message:")
    resolution = l10n.resolve("nonexistent")
    print(f"  error: {resolution.error.category if resolution.error else None}")


def example_2_three_locale_chain() -> None:
    """lv -> lt -> en with a callback reporting every fallback hop."""
    print("\n" + "=" * 60)
    print("Example 2: Three-Locale Chain (lv -> lt -> en)")
    print("=" * 60)

    chain = [
        SimpleTranslator(MessageTable(locale="lv").add("home", "Sākums")),
        SimpleTranslator(MessageTable(locale="lt").add("home", "Pradžia").add("about", "Apie")),
        SimpleTranslator(
            MessageTable(locale="en").add("home", "Home").add("about", "About").add("help", "Help")
        ),
    ]

    hops: list[FallbackInfo] = []
    l10n = FallbackTranslator(chain, on_fallback=hops.append)

    print("\nFallback resolution:")
    for message_id in ("home", "about", "help"):
        print(f"  {message_id}: {l10n.translate(message_id)}")

    print("\nReported fallbacks:")
    for info in hops:
        print(f"  {info.message_id}: {info.requested_locale} -> {info.resolved_locale}")


def example_3_errors_not_masked() -> None:
    """A broken primary message is reported, not silently replaced."""
    print("\n" + "=" * 60)
    print("Example 3: Errors Are Not Masked")
    print("=" * 60)

    lv = SimpleTranslator(MessageTable(locale="lv").add("greeting", "Sveiki, %{name}!"))
    en = SimpleTranslator(MessageTable(locale="en").add("greeting", "Hello!"))
    l10n = FallbackTranslator([lv, en])

    try:
        l10n.translate("greeting")
    except TranslationError as e:
        print(f"  [{e.category}] {e.message_id}")


if __name__ == "__main__":
    example_1_basic_fallback()
    example_2_three_locale_chain()
    example_3_errors_not_masked()
