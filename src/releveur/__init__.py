import argparse
import logging
import sys

from tabulate import tabulate

from releveur.domain.services import DEFAULT_RULES, load_rules, run
from releveur.output import write_categorized_transactions, write_transactions


def exit_with_error(msg):
    print('')
    print(msg)
    print('')
    sys.exit(1)


def main(argv=None):
    logging.basicConfig(level=logging.INFO)
    module_logger = logging.getLogger('releveur')

    parser = argparse.ArgumentParser(description='Extract and categorize bank statement transactions')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--output', default='public/data.csv', help='CSV file for all transactions')
    parser.add_argument('--categorized-output', default='data/data2.csv', help='CSV file for categorized transactions, with a header row')
    parser.add_argument('--rules', help='JSON file replacing the built-in category rules')
    parser.add_argument('input', nargs='?', default='files', help='Directory holding releve_<account>_<YYYYMM>.pdf files')

    args = parser.parse_args(argv)

    if args.debug:
        module_logger.setLevel(logging.DEBUG)
    else:
        module_logger.setLevel(logging.INFO)

    try:
        rules = load_rules(args.rules) if args.rules else DEFAULT_RULES
        result = run(args.input, module_logger, rules)
        write_transactions(args.output, result.transactions)
        write_categorized_transactions(args.categorized_output, result.transactions)
    except Exception as e:
        module_logger.debug('Run aborted', exc_info=True)
        exit_with_error(str(e) or repr(e))

    rows = []
    for statement in result.statements:
        balance = statement.balance
        rows.append([statement.context.file, len(statement.transactions), f'-{balance.debit}', f'+{balance.credit}'])
    print(tabulate(rows, headers=['File', 'Entries', 'Debit', 'Credit'], disable_numparse=True))
    print('uncategorized', result.uncategorized_count)
