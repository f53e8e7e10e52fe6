#!/usr/bin/env python3
"""
Serial write benchmark
S3 put_object vs. S3 transfer manager vs. a mounted filesystem (EFS)
"""
import argparse
import sys

from .batches import load_batches
from .config import BackendConfig, to_boolean
from .errors import BatchNotFoundError
from .logs import configure_logging
from .runner import BenchmarkRunner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="writebench",
        description="Serial write benchmark: S3 put vs. S3 transfer manager vs. mounted filesystem",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Expected two or three arguments: AWS access-key and secret-key (resp. 'debug' flag)

Examples:
  writebench AKIA... SECRET
  writebench AKIA... SECRET true

Optional environment overrides:
  WRITEBENCH_REGION, WRITEBENCH_ENDPOINT, WRITEBENCH_BUCKET,
  WRITEBENCH_MOUNT_POINT, WRITEBENCH_BATCHES_ROOT
        """
    )
    parser.add_argument('access_key', help='AWS access key')
    parser.add_argument('secret_key', help='AWS secret key')
    parser.add_argument('debug', nargs='?', default=None,
                        help="log every file write (true/yes/on/y/t)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = BackendConfig.from_env(args.access_key, args.secret_key,
                                    debug=to_boolean(args.debug))
    log = configure_logging(config.debug)

    try:
        batches = load_batches(config.batches_root)
    except BatchNotFoundError as e:
        log.error("%s (generate batches with writebench-generate)", e)
        return 1

    log.debug("Loaded %d batches from %s", len(batches), config.batches_root)

    with BenchmarkRunner(config, log=log) as runner:
        runner.run(batches)
    return 0


if __name__ == '__main__':
    sys.exit(main())
