import argparse
import logging

from .ui import UICmd


def main() -> None:
    argparser = argparse.ArgumentParser(
        prog='truthtab', description='命题公式真值表生成器')
    argparser.add_argument(
        '--debug', action='store_true', help='输出调试日志')
    args = argparser.parse_args()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    UICmd().cmdloop()


if __name__ == '__main__':
    main()
