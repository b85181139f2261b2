"""Tests for the command-line interface and simulation config."""

import re

import pytest
from click.testing import CliRunner

from percolation_stats.cli.main import cli
from percolation_stats.config import SimulationConfig
from percolation_stats.errors import InvalidArgument


REPORT_PATTERN = re.compile(
    r"^mean                    = (\S+)\n"
    r"stddev                  = (\S+)\n"
    r"95% confidence interval = \[(\S+), (\S+)\]\n$"
)


@pytest.fixture
def runner():
    return CliRunner()


class TestRunCommand:
    """Tests for the run command."""

    def test_report_format(self, runner):
        """Test the three-line report structure."""
        result = runner.invoke(cli, ['run', '10', '20', '--seed', '1'])

        assert result.exit_code == 0
        match = REPORT_PATTERN.match(result.output)
        assert match is not None
        mean, stddev, lo, hi = (float(x) for x in match.groups())
        assert 0 < mean <= 1
        assert stddev >= 0
        assert lo <= mean <= hi

    def test_seed_reproducible(self, runner):
        """Test the same seed prints the same report."""
        first = runner.invoke(cli, ['run', '5', '10', '--seed', '42'])
        second = runner.invoke(cli, ['run', '5', '10', '--seed', '42'])

        assert first.output == second.output

    def test_single_trial_prints_nan(self, runner):
        """Test a single trial reports nan for the spread."""
        result = runner.invoke(cli, ['run', '3', '1', '--seed', '0'])

        assert result.exit_code == 0
        assert 'stddev                  = nan' in result.output

    @pytest.mark.parametrize('args', [
        ['run', '0', '10'],
        ['run', '10', '0'],
        ['run', '--', '-5', '10'],
        ['run', 'abc', '10'],
        ['run', '10', '2.5'],
        ['run', '10'],
    ])
    def test_invalid_arguments(self, runner, args):
        """Test bad input exits non-zero without printing a report."""
        result = runner.invoke(cli, args)

        assert result.exit_code != 0
        assert 'mean' not in result.output

    def test_invalid_message(self, runner):
        """Test the diagnostic names the failing argument."""
        result = runner.invoke(cli, ['run', '0', '10'])

        assert result.exit_code == 2
        assert 'n must be greater than 0, provided: 0' in result.output

    def test_verbose_progress(self, runner):
        """Test --verbose reports progress alongside the report."""
        result = runner.invoke(cli, ['run', '4', '5', '--seed', '3', '--verbose'])

        assert result.exit_code == 0
        assert 'Running 5 trials on a 4x4 grid' in result.output
        assert 'Completed 5 trials' in result.output


class TestRunConfigCommand:
    """Tests for the run-config command."""

    def test_run_from_yaml(self, runner, tmp_path):
        """Test parameters are read from a YAML file."""
        config_file = tmp_path / 'sim.yaml'
        config_file.write_text("n: 6\ntrials: 8\nseed: 42\n")

        from_config = runner.invoke(cli, ['run-config', '--config', str(config_file)])
        direct = runner.invoke(cli, ['run', '6', '8', '--seed', '42'])

        assert from_config.exit_code == 0
        assert from_config.output == direct.output

    def test_invalid_yaml_values(self, runner, tmp_path):
        """Test invalid config values exit with a usage error."""
        config_file = tmp_path / 'sim.yaml'
        config_file.write_text("n: 6\ntrials: 0\n")

        result = runner.invoke(cli, ['run-config', '--config', str(config_file)])

        assert result.exit_code == 2
        assert 'trials must be greater than 0' in result.output

    def test_interval_width_is_not_configurable(self, runner, tmp_path):
        """Test a config overriding the interval z-value is rejected before any output."""
        config_file = tmp_path / 'sim.yaml'
        config_file.write_text("n: 6\ntrials: 8\nconfidence: 3.0\n")

        result = runner.invoke(cli, ['run-config', '--config', str(config_file)])

        assert result.exit_code == 2
        assert "Unknown config keys: ['confidence']" in result.output
        assert '95% confidence interval' not in result.output

    def test_missing_file(self, runner, tmp_path):
        """Test a missing config file is reported."""
        result = runner.invoke(cli, ['run-config', '--config', str(tmp_path / 'nope.yaml')])

        assert result.exit_code != 0


class TestSimulationConfig:
    """Tests for SimulationConfig."""

    def test_defaults(self):
        """Test optional keys fall back to defaults."""
        config = SimulationConfig({'n': 10, 'trials': 5})

        assert config.n == 10
        assert config.trials == 5
        assert config.seed is None

    def test_to_dict(self):
        """Test the config renders as a plain dict."""
        config = SimulationConfig({'n': 3, 'trials': 2, 'seed': 7})

        assert config.to_dict() == {'n': 3, 'trials': 2, 'seed': 7}

    @pytest.mark.parametrize('data', [
        {'trials': 5},
        {'n': 5},
        {'n': 0, 'trials': 5},
        {'n': 5, 'trials': -1},
        {'n': 'ten', 'trials': 5},
        {'n': 5, 'trials': 5, 'seed': -1},
        {'n': 5, 'trials': 5, 'seed': 1.5},
        {'n': 5, 'trials': 5, 'confidence': 1.96},
    ])
    def test_invalid(self, data):
        """Test invalid configs are rejected on construction."""
        with pytest.raises(InvalidArgument):
            SimulationConfig(data)

    def test_not_a_mapping(self):
        """Test a YAML document that is not a mapping is rejected."""
        with pytest.raises(InvalidArgument):
            SimulationConfig([1, 2])

    def test_from_yaml(self, tmp_path):
        """Test loading from a YAML file."""
        config_file = tmp_path / 'sim.yaml'
        config_file.write_text("n: 200\ntrials: 100\nseed: 1\n")

        config = SimulationConfig.from_yaml(str(config_file))

        assert config.n == 200
        assert config.trials == 100
        assert config.seed == 1

    def test_from_yaml_missing(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            SimulationConfig.from_yaml(str(tmp_path / 'missing.yaml'))
