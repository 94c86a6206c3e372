# tests/reporters/test_console_reporter.py
"""
Unit tests for the ConsoleReporter class.
"""
from unittest.mock import MagicMock, call

from kepler_source.models.instance import EnergyMetric, Instance, Provider, ResourceType
from kepler_source.reporters.console_reporter import ConsoleReporter


def make_instance(container_id, cpu=None, memory=None):
    instance = Instance(id=container_id, provider=Provider.AWS, name=f"{container_id}-name", region="eu-west-1")
    if cpu is not None:
        instance.upsert_metric(EnergyMetric(name="cpu", resource_type=ResourceType.CPU, energy=cpu))
    if memory is not None:
        instance.upsert_metric(EnergyMetric(name="memory", resource_type=ResourceType.MEMORY, energy=memory))
    return instance


def test_console_reporter_with_data(mocker):
    """
    Tests that the ConsoleReporter builds one row per instance, highest energy first.
    """
    mock_console_class = mocker.patch("kepler_source.reporters.console_reporter.Console")
    mock_table_class = mocker.patch("kepler_source.reporters.console_reporter.Table")
    mock_console_instance = MagicMock()
    mock_table_instance = MagicMock()
    mock_console_class.return_value = mock_console_instance
    mock_table_class.return_value = mock_table_instance

    reporter = ConsoleReporter()
    reporter.report([make_instance("small", cpu=1e-07), make_instance("big", cpu=2e-06, memory=1e-06)])

    assert mock_table_instance.add_column.call_count == 6
    assert mock_table_instance.add_row.call_args_list == [
        call("big", "big-name", "aws", "eu-west-1", "2.000e-06", "1.000e-06"),
        call("small", "small-name", "aws", "eu-west-1", "1.000e-07", "-"),
    ]
    mock_console_instance.print.assert_called_once_with(mock_table_instance)


def test_console_reporter_no_data(mocker):
    mock_console_class = mocker.patch("kepler_source.reporters.console_reporter.Console")
    mock_console_instance = MagicMock()
    mock_console_class.return_value = mock_console_instance

    ConsoleReporter().report([])

    mock_console_instance.print.assert_called_once_with("No instances to report.", style="yellow")
