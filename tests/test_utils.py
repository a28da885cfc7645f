"""
Tests for utility functions.
"""

import json

import click

from typingdna_client.models import CheckResult
from typingdna_client.utils import (
    OutputFormat,
    print_error,
    print_info,
    print_json,
    print_result,
    print_success,
    print_table,
    print_warning,
)


class TestPrintFunctions:
    """Tests for print_* utility functions."""
    
    def test_print_success(self, capsys):
        """Test print_success output."""
        print_success("Operation completed")
        captured = capsys.readouterr()
        assert "Operation completed" in captured.out
    
    def test_print_error_simple(self, capsys):
        """Test print_error without details."""
        print_error("Something went wrong")
        captured = capsys.readouterr()
        assert "Something went wrong" in captured.err
    
    def test_print_error_with_details(self, capsys):
        """Test print_error with details."""
        print_error("Error occurred", details="Additional info here")
        captured = capsys.readouterr()
        assert "Error occurred" in captured.err
        assert "Additional info here" in captured.err
    
    def test_print_warning(self, capsys):
        """Test print_warning output."""
        print_warning("Watch out!")
        captured = capsys.readouterr()
        assert "Watch out!" in captured.out
    
    def test_print_info(self, capsys):
        """Test print_info output."""
        print_info("Just so you know")
        captured = capsys.readouterr()
        assert "Just so you know" in captured.out
    
    def test_print_json(self, capsys):
        """Test print_json output."""
        print_json({"score": 88})
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"score": 88}


class TestPrintTable:
    """Tests for print_table function."""
    
    def test_print_basic_table(self, capsys):
        """Test basic table output."""
        headers = ["Name", "Age"]
        rows = [["Alice", "30"], ["Bob", "25"]]
        print_table(headers, rows)
        captured = capsys.readouterr()
        assert "Name" in captured.out
        assert "Age" in captured.out
        assert "Alice" in captured.out
        assert "Bob" in captured.out
    
    def test_print_empty_table(self, capsys):
        """Test table with no rows."""
        print_table(["X", "Y"], [])
        captured = capsys.readouterr()
        assert "X" in captured.out
    
    def test_none_shown_as_dash(self, capsys):
        """Test missing values."""
        print_table(["Field", "Value"], [["message", None]])
        captured = capsys.readouterr()
        assert "-" in captured.out
    
    def test_styled_cells_aligned(self, capsys):
        """Test that ANSI codes do not break alignment."""
        print_table(["A", "B"], [[click.style("ok", fg="green"), "x"], ["long-value", "y"]])
        lines = click.unstyle(capsys.readouterr().out).splitlines()
        assert lines[2].index("x") == lines[3].index("y")


class TestPrintResult:
    """Tests for print_result function."""
    
    def test_json(self, capsys):
        result = CheckResult(message="Done", success=1, status_code=200, count=4)
        print_result(result, OutputFormat.JSON)
        data = json.loads(capsys.readouterr().out)
        assert data["statusCode"] == 200
        assert data["count"] == 4
    
    def test_table(self, capsys):
        result = CheckResult(message="Done", success=1, status_code=200, count=4)
        print_result(result, OutputFormat.TABLE)
        captured = capsys.readouterr()
        assert "statusCode" in captured.out
        assert "200" in captured.out
