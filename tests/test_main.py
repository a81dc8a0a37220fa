from main import main
from scenarios import SCENARIOS


class TestMain:
    """Test the console entry point"""

    def test_prints_one_line_per_scenario(self, capsys):
        exit_code = main({})
        lines = capsys.readouterr().out.splitlines()

        assert exit_code == 0
        assert len(lines) == len(SCENARIOS)
        for name, line in zip(SCENARIOS, lines):
            assert line == f"{name}: there are 20 consonants"

    def test_selected_scenarios_and_names(self, capsys):
        exit_code = main({
            "CONSONANTS_NAMES": "Sergio",
            "CONSONANTS_SCENARIOS": "each_step_of_how_many_consonants",
        })
        out = capsys.readouterr().out

        assert exit_code == 0
        assert out == "each_step_of_how_many_consonants: there are 3 consonants\n"

    def test_empty_names_exit_nonzero(self, capsys):
        exit_code = main({
            "CONSONANTS_NAMES": "",
            "CONSONANTS_SCENARIOS": "how_many_consonants,how_many_consonants_procedural",
        })
        lines = capsys.readouterr().out.splitlines()

        assert exit_code == 1
        assert lines[0].startswith("how_many_consonants: failed (NoSuchElementError")
        assert lines[1] == "how_many_consonants_procedural: there are 0 consonants"
