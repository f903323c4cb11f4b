"""Tests for the command-line interface."""

import json
import logging

import pytest

from cli import main, parse_args


EXAMPLE = [
    "467..114..",
    "...*......",
    "..35..633.",
    "......#...",
    "617*......",
    ".....+.58.",
    "..592.....",
    "......755.",
    "...$.*....",
    ".664.598..",
]


@pytest.fixture
def schematic_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    # main() installs handlers bound to the captured stderr of each test
    for name in ("schematic", "scanner", "exporters", "cli"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)


class TestParseArgs:
    """Tests for argument parsing."""
    
    def test_defaults(self):
        """Test that unset options are left for the config layer."""
        parsed = parse_args([])
        
        assert parsed.input is None
        assert parsed.format is None
        assert parsed.config is None
    
    def test_log_level_case(self):
        """Test that log levels are case-insensitive."""
        assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"


class TestMain:
    """Tests for running the scanner end to end."""
    
    def test_text_output(self, schematic_file, capsys):
        """Test the default sentence on stdout."""
        assert main([str(schematic_file)]) == 0
        
        out = capsys.readouterr().out
        assert out == "The sum of all the gear ratios is 467835.\n"
    
    def test_json_output(self, schematic_file, capsys):
        """Test JSON output."""
        assert main([str(schematic_file), "-f", "json"]) == 0
        
        data = json.loads(capsys.readouterr().out)
        assert data["total"] == 467835
        assert len(data["gears"]) == 2
    
    def test_output_file(self, schematic_file, tmp_path, capsys):
        """Test writing output to a file."""
        output = tmp_path / "result.txt"
        
        assert main([str(schematic_file), "-o", str(output)]) == 0
        
        assert output.read_text(encoding="utf-8") == "The sum of all the gear ratios is 467835.\n"
        assert capsys.readouterr().out == ""
    
    def test_config_file(self, schematic_file, tmp_path, capsys):
        """Test options taken from a config file."""
        config = tmp_path / "gearsum.yaml"
        config.write_text(f"input: {schematic_file.as_posix()}\nformat: json\n", encoding="utf-8")
        
        assert main(["-c", str(config)]) == 0
        
        assert json.loads(capsys.readouterr().out)["total"] == 467835
    
    def test_cli_overrides_config(self, schematic_file, tmp_path, capsys):
        """Test that command-line options win over the config file."""
        config = tmp_path / "gearsum.json"
        config.write_text(json.dumps({"input": str(schematic_file), "format": "json"}), encoding="utf-8")
        
        assert main(["-c", str(config), "-f", "text"]) == 0
        
        assert capsys.readouterr().out.startswith("The sum of all the gear ratios is")
    
    def test_missing_input(self, tmp_path, capsys):
        """Test a missing schematic file."""
        assert main([str(tmp_path / "missing.txt")]) == 1
        
        assert "is not a file" in capsys.readouterr().err
    
    def test_malformed_input(self, tmp_path, capsys):
        """Test that a ragged schematic is reported."""
        path = tmp_path / "input.txt"
        path.write_text("123\n45\n", encoding="utf-8")
        
        assert main([str(path)]) == 1
        
        assert "Error: schematic row 1 has length 2" in capsys.readouterr().err
    
    def test_empty_input(self, tmp_path, capsys):
        """Test that an empty schematic is reported."""
        path = tmp_path / "input.txt"
        path.write_text("\n", encoding="utf-8")
        
        assert main([str(path)]) == 1
        
        assert "schematic is empty" in capsys.readouterr().err
    
    def test_bad_config(self, tmp_path, capsys):
        """Test that an invalid config file is reported."""
        config = tmp_path / "gearsum.yaml"
        config.write_text("color: red\n", encoding="utf-8")
        
        assert main(["-c", str(config)]) == 1
        
        assert "unknown config keys: color" in capsys.readouterr().err
    
    def test_log_file(self, schematic_file, tmp_path, capsys):
        """Test that debug logging lists every gear."""
        log_file = tmp_path / "scan.log"
        
        assert main([str(schematic_file), "--log-level", "DEBUG", "--log-file", str(log_file)]) == 0
        
        logging.getLogger("scanner").handlers[-1].flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Gear at (1, 3): 467 x 35 = 16345" in text
        assert "sum of gear ratios 467835" in text
    
    def test_null_input_uses_default(self, tmp_path, monkeypatch, capsys):
        """Test that 'input: null' in a config falls back to input.txt."""
        (tmp_path / "input.txt").write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
        config = tmp_path / "gearsum.yaml"
        config.write_text("input: null\nformat: text\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        
        assert main(["-c", str(config)]) == 0
        
        assert capsys.readouterr().out == "The sum of all the gear ratios is 467835.\n"
    
    def test_output_file_logged(self, schematic_file, tmp_path):
        """Test that writing the output file is logged under 'cli'."""
        output = tmp_path / "result.txt"
        log_file = tmp_path / "scan.log"
        
        assert main([str(schematic_file), "-o", str(output), "--log-level", "INFO", "--log-file", str(log_file)]) == 0
        
        text = log_file.read_text(encoding="utf-8")
        assert " - cli - INFO - Output written to: " in text
    
    def test_logger_name_independent_of_module_name(self):
        """Test that the CLI logger is named for the configured package loggers."""
        import cli
        
        assert cli.logger.name == "cli"
