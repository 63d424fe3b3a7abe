"""Tests for end-to-end placeholder resolution."""

import random
import re
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone
from typing import Final
import pytest
from utilkit.lib.placeholder import FunctionRegistry, PlaceholderResolver, envVars_replace

UUID_RE: Final[re.Pattern[str]] = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
)


def test_empty_input() -> None:
    assert envVars_replace("") == ""


@pytest.mark.parametrize(
    "text",
    [
        "No variables here",
        "price is $5",
        "$HOME without braces",
        "{not valid}",
        "{1VAR}",
        "{{ spaced() }}",
        "{{date(%H)%M)}}",
    ],
)
def test_text_without_placeholders_is_unchanged(text: str) -> None:
    assert envVars_replace(text) == text


def test_env_var_substitution(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEST_VAR1", "value1")
    monkeypatch.setenv("TEST_VAR2", "value2")
    assert envVars_replace("This is a ${TEST_VAR1}") == "This is a value1"
    assert envVars_replace("${TEST_VAR2} is here") == "value2 is here"
    assert envVars_replace("{TEST_VAR1}/{TEST_VAR2}") == "value1/value2"


def test_env_var_set_but_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMPTY_VAR", "")
    assert envVars_replace("[${EMPTY_VAR}]") == "[]"


def test_unset_env_var_left_literal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("UNSET_VAR_XYZ", raising=False)
    assert envVars_replace("${UNSET_VAR_XYZ}") == "${UNSET_VAR_XYZ}"


def test_env_lookup_is_live(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LIVE_VAR", "first")
    assert envVars_replace("${LIVE_VAR}") == "first"
    monkeypatch.setenv("LIVE_VAR", "second")
    assert envVars_replace("${LIVE_VAR}") == "second"


def test_double_brace_identifier_left_literal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VAR", "v")
    assert envVars_replace("{{VAR}}") == "{{VAR}}"
    assert envVars_replace("${{VAR}}") == "${{VAR}}"
    assert envVars_replace("{{VAR}} and {VAR}") == "{{VAR}} and v"


def test_uuid() -> None:
    result = envVars_replace("{{uuid()}}")
    assert len(result) == 36
    assert UUID_RE.fullmatch(result)


def test_random_hex() -> None:
    assert re.fullmatch(r"[0-9a-f]{8}", envVars_replace("{{randomHex(8)}}"))
    assert re.fullmatch(r"[0-9a-f]{7}", envVars_replace("{{randomHex(7)}}"))
    assert re.fullmatch(r"[0-9a-f]{32}", envVars_replace("{{randomHex()}}"))


def test_random_string() -> None:
    assert re.fullmatch(r"[A-Za-z0-9]{32}", envVars_replace("{{randomString()}}"))
    assert re.fullmatch(r"[A-Za-z0-9]{5}", envVars_replace("{{randomString( 5 )}}"))
    assert re.fullmatch(r"[A-Za-z0-9]{1024}", envVars_replace("{{randomString(1024)}}"))


@pytest.mark.parametrize(
    "text",
    [
        "{{randomString(2000)}}",
        "{{randomString(0)}}",
        "{{randomHex(-3)}}",
        "{{randomHex(abc)}}",
        "{{randomHex(1_0)}}",
    ],
)
def test_invalid_length_left_literal(text: str) -> None:
    assert envVars_replace(f"x {text} y") == f"x {text} y"


def test_function_names_are_case_insensitive() -> None:
    assert re.fullmatch(r"[0-9a-f]{4}", envVars_replace("{{RANDOMHEX(4)}}"))
    assert UUID_RE.fullmatch(envVars_replace("{{UUID()}}"))


def test_unknown_function_left_literal() -> None:
    assert envVars_replace("{{unknownFn()}}") == "{{unknownFn()}}"


def test_function_pass_runs_before_env_pass(
    monkeypatch: pytest.MonkeyPatch, fixed_resolver: PlaceholderResolver
) -> None:
    monkeypatch.setenv("LAYOUT_VAR", "from-env")
    assert envVars_replace("{{date(${LAYOUT_VAR})}}", fixed_resolver) == "from-env"


def test_fixed_clock(fixed_resolver: PlaceholderResolver, fixed_moment: datetime) -> None:
    seconds = int(fixed_moment.timestamp())
    assert envVars_replace("{{timestamp()}}", fixed_resolver) == str(seconds)
    assert envVars_replace("{{timestampMs()}}", fixed_resolver) == str(seconds * 1000 + 120)
    assert envVars_replace("{{now()}}", fixed_resolver) == "2024-03-05T14:07:09Z"
    assert envVars_replace("{{date()}}", fixed_resolver) == "2024-03-05T14:07:09Z"
    assert envVars_replace("{{date(date)}}", fixed_resolver) == "2024-03-05"
    assert envVars_replace("{{date( %Y/%m )}}", fixed_resolver) == "2024/03"


def test_now_with_offset_clock() -> None:
    moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=-5)))
    resolver = PlaceholderResolver(registry=FunctionRegistry(clock=lambda: moment))
    assert envVars_replace("{{now()}}", resolver) == "2024-01-02T03:04:05-05:00"


def test_seeded_random_source_is_deterministic() -> None:
    def resolver_build() -> PlaceholderResolver:
        return PlaceholderResolver(
            registry=FunctionRegistry(random_source=random.Random(99).randbytes)
        )

    text = "{{randomString(16)}} {{randomHex(16)}} {{uuid()}}"
    assert envVars_replace(text, resolver_build()) == envVars_replace(text, resolver_build())


def test_random_source_failure_yields_empty() -> None:
    def source_broken(count: int) -> bytes:
        raise OSError("entropy pool unavailable")

    resolver = PlaceholderResolver(registry=FunctionRegistry(random_source=source_broken))
    assert envVars_replace("a{{uuid()}}b{{randomHex(4)}}c", resolver) == "abc"


def test_short_random_read_yields_empty() -> None:
    resolver = PlaceholderResolver(registry=FunctionRegistry(random_source=lambda n: b""))
    assert envVars_replace("[{{randomString(8)}}]", resolver) == "[]"


def test_injected_lookup() -> None:
    resolver = PlaceholderResolver(lookup={"A": "1"}.get)
    assert resolver.replace("${A}-${B}") == "1-${B}"


def test_resolved_text_is_a_fixed_point(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME_X", "/home/x")
    once = envVars_replace("id={{uuid()}} home=${HOME_X} t={{timestamp()}}")
    assert envVars_replace(once) == once


def test_mixed_resolved_and_unresolved(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USER_NAME", "ada")
    monkeypatch.delenv("MISSING_ONE", raising=False)
    result = envVars_replace("${USER_NAME} {{nope()}} ${MISSING_ONE} {{randomHex(2)}}")
    head, tail = result.rsplit(" ", 1)
    assert head == "ada {{nope()}} ${MISSING_ONE}"
    assert re.fullmatch(r"[0-9a-f]{2}", tail)


def test_concurrent_use(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHARED_VAR", "shared")
    texts = [f"{i}:${{SHARED_VAR}}:{{{{randomHex(6)}}}}" for i in range(200)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(envVars_replace, texts))
    for i, result in enumerate(results):
        assert re.fullmatch(rf"{i}:shared:[0-9a-f]{{6}}", result)


def test_date_with_nul_layout_stays_literal(fixed_resolver: PlaceholderResolver) -> None:
    assert envVars_replace("at {{date(\x00)}}", fixed_resolver) == "at {{date(\x00)}}"
