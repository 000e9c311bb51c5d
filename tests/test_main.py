"""
main.pyのテスト
"""
import pytest
import yaml
from main import main


@pytest.fixture
def settings_path(tmp_path):
    """テスト用settings.yaml"""
    path = tmp_path / "settings.yaml"
    with open(path, 'w', encoding='utf-8') as f:
        yaml.dump({
            'schedule': {'default_period': 2},
            'output': {'work_marker': '+', 'style': 'list'},
            'logging': {'level': 'WARNING'}
        }, f)
    return str(path)


def run_main(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestMain:
    """CLIのテスト"""

    def test_prints_schedule(self, settings_path, capsys):
        code = run_main(['--month', '1', '--year', '2023', '--config', settings_path])

        assert code == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[:4] == ["Array", "(", "    [0] => 02-01-2023+", "    [1] => 03-01-2023"]
        # default_period: 2 → 59日分
        assert lines[-2] == "    [58] => 01-03-2023"
        assert lines[-1] == ")"

    def test_period_option_overrides_settings(self, settings_path, capsys):
        code = run_main(['--month', '2', '--year', '2023', '--period', '1', '--config', settings_path])

        assert code == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 28 + 3

    def test_table_with_stats(self, settings_path, capsys):
        code = run_main([
            '--month', '1', '--year', '2023', '--period', '2',
            '--style', 'table', '--stats', '--config', settings_path
        ])

        assert code == 0
        out = capsys.readouterr().out
        assert '02-01-2023+' in out
        assert '勤務: 17日' in out

    def test_invalid_month(self, settings_path, capsys):
        """整数でない月はエラーメッセージのみ出力して終了"""
        code = run_main(['--month', 'abc', '--year', '2023', '--config', settings_path])

        assert code == 1
        assert capsys.readouterr().out == "Error: abc - is not an integer\n"

    def test_invalid_period(self, settings_path, capsys):
        code = run_main(['--month', '1', '--year', '2023', '--period', '0', '--config', settings_path])

        assert code == 1
        assert capsys.readouterr().out == "Error: 0 - is not a positive integer\n"

    def test_invalid_settings_file(self, tmp_path, capsys):
        path = tmp_path / "settings.yaml"
        path.write_text("- a\n", encoding='utf-8')

        code = run_main(['--month', '1', '--year', '2023', '--config', str(path)])

        assert code == 1
        assert capsys.readouterr().out == ""

    def test_period_beyond_supported_dates(self, settings_path, capsys):
        """扱える日付を超える期間はエラーメッセージのみ出力して終了"""
        code = run_main(['--month', '1', '--year', '2023', '--period', '999999', '--config', settings_path])

        assert code == 1
        assert capsys.readouterr().out == "Error: 999999 - is out of the supported date range\n"

    def test_last_month_of_year_9999(self, settings_path, capsys):
        code = run_main(['--month', '12', '--year', '9999', '--period', '1', '--config', settings_path])

        assert code == 1
        assert capsys.readouterr().out == "Error: 1 - is out of the supported date range\n"

    def test_debug_reaches_module_loggers(self, settings_path, capsys):
        """--debug で展開処理のDEBUGログも出力される"""
        code = run_main(['--month', '1', '--year', '2023', '--period', '2', '--debug', '--config', settings_path])

        assert code == 0
        err = capsys.readouterr().err
        assert 'src.pattern_walker - DEBUG - 展開完了: 59日 (勤務17日, 休み42日)' in err

    def test_log_level_from_settings(self, tmp_path, capsys):
        """settings.yaml の logging.level がモジュールのロガーにも反映される"""
        path = tmp_path / "settings.yaml"
        with open(path, 'w', encoding='utf-8') as f:
            yaml.dump({'logging': {'level': 'DEBUG'}}, f)

        code = run_main(['--month', '1', '--year', '2023', '--config', str(path)])

        assert code == 0
        err = capsys.readouterr().err
        assert 'src.window_calculator - INFO - 対象期間' in err
        assert 'src.pattern_walker - DEBUG - 展開完了' in err

    def test_warning_level_hides_info_logs(self, settings_path, capsys):
        code = run_main(['--month', '1', '--year', '2023', '--config', settings_path])

        assert code == 0
        assert '対象期間' not in capsys.readouterr().err


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
