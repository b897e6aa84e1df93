from __future__ import annotations

import pytest
from lsprotocol.types import ParameterInformation

from completionls.completion.php.function_signature_helper import (
    FunctionSignatureHelper,
    split_parameters,
)
from completionls.completion.suggestion import ByteOffset, SourceDocument

DECLARATIONS = (
    "<?php\n"
    "function greet(string $name, string $greeting = 'Hello'): string\n"
    "{\n"
    "    return $greeting . $name;\n"
    "}\n"
    "function now() {}\n"
)


async def signature_help(text: str, offset: int | None = None):
    offset = len(text.encode()) if offset is None else offset
    source = SourceDocument(uri="file:///test.php", text=text, language_id="php")
    return await FunctionSignatureHelper().signature_help(source, ByteOffset(offset))


@pytest.mark.asyncio
async def test_first_parameter_after_open_paren():
    result = await signature_help(DECLARATIONS + "greet(")

    assert result.active_signature == 0
    assert result.active_parameter == 0
    signature = result.signatures[0]
    assert signature.label == "greet(string $name, string $greeting = 'Hello'): string"
    assert signature.parameters == [
        ParameterInformation(label="string $name"),
        ParameterInformation(label="string $greeting = 'Hello'"),
    ]


@pytest.mark.asyncio
async def test_commas_select_active_parameter():
    result = await signature_help(DECLARATIONS + "greet($bob, ")

    assert result.active_parameter == 1


@pytest.mark.asyncio
async def test_commas_in_nested_calls_do_not_count():
    result = await signature_help(DECLARATIONS + "greet(strlen($a, $b), ")

    assert result.signatures[0].label.startswith("greet(")
    assert result.active_parameter == 1


@pytest.mark.asyncio
async def test_commas_in_array_arguments_do_not_count():
    result = await signature_help(DECLARATIONS + "greet([1, 2], ")

    assert result.active_parameter == 1


@pytest.mark.asyncio
async def test_active_parameter_is_clamped():
    result = await signature_help(DECLARATIONS + "greet($a, $b, $c, ")

    assert result.active_parameter == 1


@pytest.mark.asyncio
async def test_function_without_parameters():
    result = await signature_help(DECLARATIONS + "now(")

    assert result.signatures[0].label == "now()"
    assert result.active_parameter is None


@pytest.mark.asyncio
async def test_names_are_case_insensitive():
    result = await signature_help(DECLARATIONS + "GREET(")

    assert result is not None


@pytest.mark.asyncio
async def test_method_calls_use_declared_methods():
    text = "<?php\nclass A {\n    public function run(int $times) {}\n}\n$a->run("

    result = await signature_help(text)

    assert result.signatures[0].label == "run(int $times)"


@pytest.mark.parametrize(
    "tail",
    [
        "greet($a);\n",
        "strlen(",
        "function greet(",
        "echo 1;\n",
    ],
)
@pytest.mark.asyncio
async def test_no_signature(tail):
    assert await signature_help(DECLARATIONS + tail) is None


@pytest.mark.asyncio
async def test_offset_past_end_is_clamped():
    text = DECLARATIONS + "greet("

    result = await signature_help(text, len(text.encode()) + 10)

    assert result.active_parameter == 0


@pytest.mark.parametrize(
    "parameters, expected",
    [
        ("", []),
        ("$a", ["$a"]),
        ("$a, $b", ["$a", "$b"]),
        ("array $a = [1, 2], $b", ["array $a = [1, 2]", "$b"]),
    ],
)
def test_split_parameters(parameters, expected):
    assert split_parameters(parameters) == expected
