__all__ = ['UICmd', 'format_table']

from typing import Dict, List, Literal, Sequence
import cmd
from .chars import is_identifier
from .lexer import Token, tokenize
from .parser import FormulaSyntaxError, parse
from .eval import (
    FALSE_SYMBOL, TRUE_SYMBOL, EvaluationError, evaluate,
    generate_truth_table, get_variables, substitute)


def format_table(table: Sequence[Sequence[str]], formula: str, *,
                 unicode: bool = False) -> str:
    u = unicode
    variables, rows = table[0], table[1:]
    buf = []
    col_1_width = max(len(variables) * 2 + 1, 3)
    col_2_width = len(formula) + 2

    buf.append('┌' if u else '/')
    buf.append(('─' if u else '-') * col_1_width)
    buf.append('┬' if u else '+')
    buf.append(('─' if u else '-') * col_2_width)
    buf.append('┐' if u else '\\')
    buf.append('\n')

    buf.append('│' if u else '|')
    buf.append(' ')
    buf.append(' '.join(variables).ljust(col_1_width - 2))
    buf.append(' ')
    buf.append('│' if u else '|')
    buf.append(' ')
    buf.append(formula)
    buf.append(' ')
    buf.append('│' if u else '|')
    buf.append('\n')

    for i, row in enumerate(rows):
        if i:
            buf.append('├' if u else '+')
            buf.append(('─' if u else '-') * col_1_width)
            buf.append('┼' if u else '+')
            buf.append(('─' if u else '-') * col_2_width)
            buf.append('┤' if u else '+')
        else:
            buf.append('┝' if u else '+')
            buf.append(('━' if u else '-') * col_1_width)
            buf.append('┿' if u else '+')
            buf.append(('━' if u else '-') * col_2_width)
            buf.append('┥' if u else '+')
        buf.append('\n')

        buf.append('│' if u else '|')
        buf.append(' ')
        buf.append(' '.join(row[:-1]).ljust(col_1_width - 2))
        buf.append(' │' if u else ' |')
        buf.append(row[-1].center(col_2_width))
        buf.append('│\n' if u else '|\n')

    buf.append('└' if u else '\\')
    buf.append(('─' if u else '-') * col_1_width)
    buf.append('┴' if u else '+')
    buf.append(('─' if u else '-') * col_2_width)
    buf.append('┘\n' if u else '/\n')

    return ''.join(buf)


class UICmd(cmd.Cmd):
    intro = '输入 ? 或 help 以显示所有命令。'
    prompt = '? '

    def __init__(self) -> None:
        super().__init__()
        self._formulas: Dict[str, str] = {}
        self._postfix: Dict[str, List[Token]] = {}

    def _get_valid_name(self, name: str, *, no_exist: bool = False) -> str:
        if name:
            if not is_identifier(name.upper()):
                print(f'{name!r} 不是有效的公式名。')
                raise ValueError
            name = name.upper()
            if name not in self._formulas and not no_exist:
                print(f'{name} 公式尚未被定义。')
                raise ValueError
            elif no_exist and name in self._formulas:
                print(f'{name} 公式已被定义。')
                raise ValueError
            return name
        else:
            print('公式名未指定。')
            raise ValueError

    def do_exit(self, arg: str) -> Literal[True]:
        """退出程序。

        exit
        """
        return True

    def do_EOF(self, arg: str) -> Literal[True]:
        return self.do_exit(arg)

    def do_list(self, arg: str) -> None:
        """列出所有已添加的公式，或指定的公式。\n\nlist [公式名]"""
        if not self._formulas:
            print('尚未加入任何公式。')
            return

        if arg:
            try:
                name = self._get_valid_name(arg)
            except ValueError:
                return
            print(f'{name}: {self._formulas[name]}')
        else:
            for name, formula in self._formulas.items():
                print(f'{name}: {formula}')

    def do_new(self, arg: str) -> None:
        """添加新公式。\n\nnew 公式名"""
        try:
            name = self._get_valid_name(arg, no_exist=True)
        except ValueError:
            return

        formula = input('输入公式: ').strip()
        try:
            postfix = parse(tokenize(formula))
        except FormulaSyntaxError as e:
            print(f'语法分析错误: {e}')
            return
        self._formulas[name] = formula
        self._postfix[name] = postfix

    def do_del(self, arg: str) -> None:
        """删除已有的公式。\n\ndel 公式名"""
        try:
            name = self._get_valid_name(arg)
        except ValueError:
            return
        self._formulas.pop(name)
        self._postfix.pop(name)

    def do_tokens(self, arg: str) -> None:
        """列出公式的词法单元。\n\ntokens 公式名"""
        try:
            name = self._get_valid_name(arg)
        except ValueError:
            return
        for token in tokenize(self._formulas[name]):
            print(f'{token.position:>4} {token.kind.name:<16} {token.literal!r}')

    def do_rpn(self, arg: str) -> None:
        """以后缀形式打印公式。\n\nrpn 公式名"""
        try:
            name = self._get_valid_name(arg)
        except ValueError:
            return
        print(' '.join(t.literal for t in self._postfix[name]))

    def do_tt(self, arg: str, *, unicode: bool = False) -> None:
        """打印公式的真值表。\n\ntt 公式名"""
        try:
            name = self._get_valid_name(arg)
        except ValueError:
            return
        try:
            table = generate_truth_table(self._postfix[name])
        except EvaluationError as e:
            print(f'求值错误: {e}')
            return
        print(format_table(table, self._formulas[name], unicode=unicode), end='')

    def do_ttu(self, arg: str) -> None:
        """以 Unicode 字符打印真值表。另见 tt 命令。"""
        self.do_tt(arg, unicode=True)

    def do_eval(self, arg: str) -> None:
        """以给定解释对公式求值。\n\neval 公式名"""
        try:
            name = self._get_valid_name(arg)
        except ValueError:
            return
        postfix = self._postfix[name]
        variables = get_variables(postfix)

        values = []
        if variables:
            print('分别为每个变量指定值 (1 或 0)。')
        for var_name in variables:
            values.append(bool(int(input(f'{var_name} = '))))
        try:
            result = evaluate(substitute(postfix, variables, values))
        except EvaluationError as e:
            print(f'求值错误: {e}')
            return
        print(f'值是 {TRUE_SYMBOL if result else FALSE_SYMBOL}。')
