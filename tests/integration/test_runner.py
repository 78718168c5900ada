"""
End-to-end tests for the batch runner.

Builds a small radioline export on disk, runs the CLI entry point and
checks the written link summaries.
"""
from datetime import date

import pandas as pd
import pytest

from radiolinks.runner import build_parser, main, run
from radiolinks.utils.config import EngineConfig, ThroughputParams


RADIOLINES = """\
id,tx_latitude,tx_longitude,rx_latitude,rx_longitude,frequency_mhz,polarization,channel_width_mhz,modulation,permit_number,permit_expiry,operator_id
1,52.0,21.0,52.1,21.2,18000,V,28,256QAM,P1,2030-12-31,26001
2,52.0,21.0,52.1,21.2,18000,H,28,256QAM,P1,2030-12-31,26001
3,52.1,21.2,52.0,21.0,19010,V,28,256QAM,P1,2030-12-31,26001
4,52.1,21.2,52.0,21.0,19010,H,28,256QAM,P1,2030-12-31,26001
5,52.0,21.0,51.9,20.8,23000,V,56,1024QAM,,2024-06-30,26002
6,51.9,20.8,52.0,21.0,24008,V,56,1024QAM,,2024-06-30,26002
7,51.9,20.8,50.0647,19.945,7000,H,14,FOO,,,
"""


@pytest.fixture
def radioline_csv(tmp_path):
    path = tmp_path / "radiolines.csv"
    path.write_text(RADIOLINES)
    return path


def test_main_writes_link_summaries(radioline_csv, tmp_path):
    output = tmp_path / "out" / "links.csv"

    exit_code = main([
        '--input', str(radioline_csv),
        '--output', str(output),
        '--as-of', '2026-01-01',
    ])

    assert exit_code == 0
    assert output.exists()

    df = pd.read_csv(output, dtype={'record_ids': str})
    assert len(df) == 3
    by_key = df.set_index('group_key')

    xpic = by_key.loc['26001:permit:P1']
    assert xpic['architecture'] == 'XPIC'
    assert xpic['record_ids'] == '2;1;4;3'
    assert bool(xpic['is_expired']) is False
    assert xpic['throughput_mbps'] == pytest.approx(761.6, abs=0.01)

    fdd = by_key.loc['26002:path:51.9,20.8|52,21']
    assert fdd['architecture'] == 'FDD'
    assert bool(fdd['is_expired']) is True
    assert fdd['expired_direction_count'] == 2

    lone = by_key.loc['(unknown):path:50.0647,19.945|51.9,20.8']
    assert lone['direction_count'] == 1
    assert pd.isna(lone['throughput_mbps'])


def test_run_uses_config_derating(radioline_csv, tmp_path):
    output = tmp_path / "links.csv"
    config = EngineConfig(throughput=ThroughputParams(derating_factor=1.0))

    count = run(radioline_csv, output, config=config, as_of=date(2026, 1, 1))

    assert count == 3
    df = pd.read_csv(output).set_index('group_key')
    assert df.loc['26001:permit:P1', 'throughput_mbps'] == pytest.approx(896.0)


def test_main_with_config_file(radioline_csv, tmp_path):
    config_path = tmp_path / "engine.yaml"
    config_path.write_text("grouping:\n  unknown_operator_label: no-operator\n")
    output = tmp_path / "links.csv"

    exit_code = main([
        '--input', str(radioline_csv),
        '--output', str(output),
        '--config', str(config_path),
        '--json-logs',
    ])

    assert exit_code == 0
    df = pd.read_csv(output)
    assert 'no-operator' in set(df['operator'])


def test_main_bad_config_returns_error(radioline_csv, tmp_path):
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("throughput:\n  derating_factor: 3\n")

    exit_code = main([
        '--input', str(radioline_csv),
        '--output', str(tmp_path / "links.csv"),
        '--config', str(config_path),
    ])

    assert exit_code == 1


def test_main_missing_input_returns_error(tmp_path):
    exit_code = main([
        '--input', str(tmp_path / "missing.csv"),
        '--output', str(tmp_path / "links.csv"),
    ])

    assert exit_code == 1
    assert not (tmp_path / "links.csv").exists()


def test_parser_rejects_bad_date():
    with pytest.raises(SystemExit):
        build_parser().parse_args(['--input', 'a.csv', '--output', 'b.csv', '--as-of', '01/01/2026'])
