"""
勤務ローテーション当番表 - メインエントリーポイント

使用例:
    python main.py --month 1 --year 2023 --period 2
    python main.py --period 3 --style table --stats
"""

import argparse
import sys

from utils.logger import setup_logger, configure_loggers
from src.settings_loader import load_settings, DEFAULT_SETTINGS_PATH
from src.input_validator import InvalidInputError
from src.schedule_generator import generate_schedule
from src.output_formatter import OutputFormatter, STYLES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='勤務ローテーション当番表（土日休み → 勤務1日 → 休み2日）',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用例:
  python main.py --month 1 --year 2023 --period 2
  python main.py --period 3 --style table --stats
        """
    )

    # 値の検証はinput_validatorで行うため文字列のまま受け取る
    parser.add_argument(
        '--month',
        type=str,
        help='開始月（1～12、省略時は今月）'
    )
    parser.add_argument(
        '--year',
        type=str,
        help='開始年（省略時は今年）'
    )
    parser.add_argument(
        '--period',
        type=str,
        help='期間（月数、省略時は設定ファイルの値）'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=DEFAULT_SETTINGS_PATH,
        help=f'設定ファイルパス（デフォルト: {DEFAULT_SETTINGS_PATH}）'
    )
    parser.add_argument(
        '--style',
        choices=STYLES,
        help='出力形式（list / table、省略時は設定ファイルの値）'
    )
    parser.add_argument(
        '--stats',
        action='store_true',
        help='月別の統計情報を表示'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='デバッグモード（詳細ログ出力）'
    )
    return parser


def main(argv=None):
    """メイン処理"""
    args = build_parser().parse_args(argv)

    logger = setup_logger('main', 'DEBUG' if args.debug else 'INFO')

    try:
        settings = load_settings(args.config)
        log_settings = settings['logging']
        log_level = 'DEBUG' if args.debug else log_settings.get('level', 'INFO')
        configure_loggers(log_level, log_settings.get('log_file'))

        period = args.period
        if period is None:
            period = settings['schedule']['default_period']

        window, schedule = generate_schedule(args.month, args.year, period)

        output_settings = settings['output']
        formatter = OutputFormatter(
            work_marker=output_settings['work_marker'],
            date_format=output_settings['date_format']
        )
        style = args.style or output_settings['style']
        statistics = formatter.generate_statistics(schedule) if args.stats else None
        formatter.print_schedule(schedule, window, style, statistics)

        logger.info("処理が正常に完了しました")
        sys.exit(0)

    except InvalidInputError as e:
        # 入力値エラー: 当番表は出力せずに終了
        print(e.diagnostic())
        sys.exit(1)

    except ValueError as e:
        logger.error("処理を中断しました")
        logger.error(str(e))
        sys.exit(1)

    except Exception as e:
        logger.error(f"予期しないエラーが発生しました: {e}")
        if args.debug:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
