"""Tests for reflecting PHP files on disk."""

from pathlib import Path

import pytest

from reflectfile_mcp.errors import FileAccessError, ParseFailure
from reflectfile_mcp.parser import DeclarationKind, SourceSyntaxError
from reflectfile_mcp.reflected_file import ReflectedFile, open_file
from reflectfile_mcp.reflection import LexicalStrategy, ResolvedStrategy, reflect_source


def declaration_table(keyword: str, name: str, body: str = " {}") -> list[tuple[str, list[str]]]:
    """Namespace layouts for one declaration keyword and their expected names."""
    decl = f"{keyword} {name}{body}"
    upper = f"{keyword.upper()} {name}{body}"
    return [
        ("", []),
        (decl, []),
        (f"<?php {decl}", [name]),
        (f"<?php namespace Foo; {decl}", [f"Foo\\{name}"]),
        (f"<?php namespace {{ {decl} }}", [name]),
        (f"<?php namespace Foo {{ {decl} }}", [f"Foo\\{name}"]),
        (f"<?php namespace Foo {{ {decl} }} namespace Bar {{ {decl} }}", [f"Foo\\{name}", f"Bar\\{name}"]),
        (f"<?php namespace Foo; {decl} namespace Bar; {decl}", [f"Foo\\{name}", f"Bar\\{name}"]),
        (f"<?php namespace Foo {{ {decl} }} namespace {{ {decl} }}", [f"Foo\\{name}", name]),
        (f"<?php namespace Bar {{ {upper} }}", [f"Bar\\{name}"]),
        (f"<?php namespace Bar {{ {decl} interface Other {{}} }}", [f"Bar\\{name}"]),
        (
            f"<?php namespace {{ {decl} }} namespace Bar {{ {decl} }} namespace Foo {{ {decl} }}",
            [name, f"Bar\\{name}", f"Foo\\{name}"],
        ),
        ("<?php namespace {}", []),
    ]


CLASS_CASES = declaration_table("class", "Bar")
TRAIT_CASES = declaration_table("trait", "Bar")
ENUM_CASES = declaration_table("enum", "Bar")
FUNCTION_CASES = declaration_table("function", "bar", "() {}")
CONSTANT_CASES = declaration_table("const", "bar", ' = "hello";')
INTERFACE_CASES = [
    ("<?php interface Foobar {}", ["Foobar"]),
    ("<?php namespace Foo; interface Bar {}", ["Foo\\Bar"]),
    ("<?php namespace Foo { interface Bar {} } namespace { interface Bar {} }", ["Foo\\Bar", "Bar"]),
    ("<?php namespace Bar { INTERFACE Bar {} }", ["Bar\\Bar"]),
]


@pytest.fixture
def php_file(tmp_path):
    """Write a PHP file and return its path."""
    def write(source: str, name: str = "test.php") -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path
    return write


@pytest.mark.parametrize("source,expected", CLASS_CASES)
def test_class_names(php_file, source, expected):
    """Test class names across namespace layouts."""
    assert ReflectedFile(php_file(source)).class_names == expected


@pytest.mark.parametrize("source,expected", TRAIT_CASES)
def test_trait_names(php_file, source, expected):
    """Test trait names across namespace layouts."""
    assert ReflectedFile(php_file(source)).trait_names == expected


@pytest.mark.parametrize("source,expected", INTERFACE_CASES)
def test_interface_names(php_file, source, expected):
    """Test interface names across namespace layouts."""
    assert ReflectedFile(php_file(source)).interface_names == expected


@pytest.mark.parametrize("source,expected", ENUM_CASES)
def test_enum_names(php_file, source, expected):
    """Test enum names across namespace layouts."""
    assert ReflectedFile(php_file(source)).enum_names == expected


@pytest.mark.parametrize("source,expected", FUNCTION_CASES)
def test_function_names(php_file, source, expected):
    """Test function names across namespace layouts."""
    assert ReflectedFile(php_file(source)).function_names == expected


@pytest.mark.parametrize("source,expected", CONSTANT_CASES)
def test_constant_names(php_file, source, expected):
    """Test constant names across namespace layouts."""
    assert ReflectedFile(php_file(source)).constant_names == expected


@pytest.mark.parametrize("strategy", [LexicalStrategy, ResolvedStrategy])
def test_strategies_agree(php_file, strategy):
    """Test that both strategies report the same names for a real file."""
    source = """<?php
namespace Acme\\Billing;

use Acme\\Support\\Money;

interface Chargeable {}

trait HasTotals
{
    public function total(): Money
    {
        return new Money(0);
    }
}

enum Status: string
{
    case Paid = 'paid';
}

final class Invoice implements Chargeable
{
    use HasTotals;

    const PREFIX = 'INV';
}

function invoice_number(int $id): string
{
    $format = function ($n) { return Invoice::PREFIX . $n; };
    return $format($id);
}

if (!function_exists('money')) {
    function money() {}
}

const CURRENCY = 'EUR';
"""
    reflected = ReflectedFile(php_file(source), strategy())

    assert reflected.interface_names == ["Acme\\Billing\\Chargeable"]
    assert reflected.trait_names == ["Acme\\Billing\\HasTotals"]
    assert reflected.enum_names == ["Acme\\Billing\\Status"]
    assert reflected.class_names == ["Acme\\Billing\\Invoice"]
    assert reflected.function_names == ["Acme\\Billing\\invoice_number"]
    assert reflected.constant_names == ["Acme\\Billing\\CURRENCY"]
    assert reflected.names(DeclarationKind.CLASS) == ["Acme\\Billing\\Invoice"]


def test_anonymous_declarations_are_skipped(php_file):
    """Test that anonymous classes and closures are never reported."""
    reflected = ReflectedFile(php_file("<?php class A {} $b = new class {}; $c = function () {}; class D {}"))

    assert reflected.class_names == ["A", "D"]
    assert reflected.function_names == []


def test_empty_file(php_file):
    """Test that an empty file reports nothing and does not fail."""
    reflected = ReflectedFile(php_file(""))

    assert reflected.result.is_empty()


def test_missing_file(tmp_path):
    """Test that a missing file cannot be reflected."""
    with pytest.raises(FileAccessError):
        ReflectedFile(tmp_path / "missing.php")


def test_directory_is_not_a_file(tmp_path):
    """Test that a directory cannot be reflected."""
    with pytest.raises(FileAccessError):
        open_file(tmp_path)


def test_unreadable_file(php_file, monkeypatch):
    """Test that read failures become FileAccessError."""
    path = php_file("<?php class Foo {}")

    def deny(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_bytes", deny)

    with pytest.raises(FileAccessError) as excinfo:
        ReflectedFile(path)

    assert isinstance(excinfo.value.__cause__, PermissionError)


def test_file_metadata(php_file):
    """Test file name, path and verbatim source."""
    path = php_file("Testing is a virtue!", name="virtue.php")

    reflected = open_file(str(path))

    assert reflected.file_name == "virtue.php"
    assert reflected.path_name == str(path)
    assert reflected.source == "Testing is a virtue!"
    assert reflected.raw_source == b"Testing is a virtue!"
    assert str(reflected) == "Testing is a virtue!"


def test_parse_failure_on_first_access(php_file):
    """Test that invalid source fails before any name list is returned."""
    reflected = ReflectedFile(php_file("<?php\nclass Foo {"))

    with pytest.raises(ParseFailure) as excinfo:
        reflected.class_names

    assert isinstance(excinfo.value.diagnostic, SourceSyntaxError)


def test_result_is_memoized(php_file):
    """Test that the file is parsed once and the result never changes."""
    path = php_file("<?php class Foo {}")
    reflected = ReflectedFile(path)

    first = reflected.result
    path.write_text("<?php class Bar {}", encoding="utf-8")

    assert reflected.result is first
    assert reflected.class_names == ["Foo"]


def test_reflect_source_scenarios():
    """Test the documented round-trip scenarios on raw sources."""
    assert reflect_source("<?php namespace Foo; class Bar {}").class_names == ("Foo\\Bar",)
    assert reflect_source(
        "<?php namespace Foo; class X {} namespace Bar; class X {}"
    ).class_names == ("Foo\\X", "Bar\\X")
    assert reflect_source("").is_empty()
