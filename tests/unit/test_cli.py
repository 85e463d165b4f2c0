"""
Unit Tests for the advisor command line
"""

import json

import pytest
import advisor_cli


class TestCli:

    def test_html_run_writes_output(self, dispatcher, temp_dir, capsys):
        output = temp_dir / "report.html"
        code = advisor_cli.main(
            ["--agent", "SA", "--context", "deadlines", "--format", "HTML", "--output", str(output)],
            dispatcher=dispatcher,
        )

        assert code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["status"] == "success"
        assert output.read_text(encoding="utf-8") == payload["output"]

    def test_failure_exit_code(self, dispatcher, capsys):
        code = advisor_cli.main(["--agent", "XX", "--format", "HTML"], dispatcher=dispatcher)
        assert code == 1
        assert json.loads(capsys.readouterr().out)["message"] == 'Agent "XX" not found'

    def test_email_run(self, dispatcher, mailer, capsys):
        code = advisor_cli.main(["-a", "SA", "-c", "x", "-f", "EMAIL"], dispatcher=dispatcher)
        assert code == 0
        assert len(mailer.sent) == 1

    def test_list_agents(self, capsys):
        code = advisor_cli.main(["--list-agents"])
        assert code == 0
        names = [a["name"] for a in json.loads(capsys.readouterr().out)["agents"]]
        assert names == ["EA", "SA", "CT", "SM"]

    def test_list_agents_malformed_file(self, test_settings, temp_dir, capsys):
        agents_file = temp_dir / "agents.json"
        agents_file.write_text("[]", encoding="utf-8")
        test_settings.agents_file = agents_file

        assert advisor_cli.list_agents(test_settings) == 1
        payload = json.loads(capsys.readouterr().out)
        assert payload["status"] == "error"
        assert "expected a JSON object" in payload["message"]

    def test_default_format_is_pdf(self):
        args = advisor_cli.build_parser().parse_args(["--agent", "SA"])
        assert args.output_format == "PDF"
