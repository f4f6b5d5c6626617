"""CLI interface for file transfers."""
import sys
import argparse
from pathlib import Path

from botocore.exceptions import BotoCoreError, ClientError
from dotenv import load_dotenv

from transferkit.application import TransferService
from transferkit.domain.exceptions import TransferKitError
from transferkit.infrastructure.config import ConfigLoader
from transferkit.shared.logging import setup_logger, get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='transferkit',
        description="Move files between local disk, HTTP(S) and S3-compatible buckets"
    )
    parser.add_argument('--config', type=Path, help='Config YAML file')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose')
    parser.add_argument('--no-checksum', action='store_true', help='Do not send Content-MD5 on upload')

    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('download', help='Download an http(s):// or s3:// URL to a local file')
    p.add_argument('url')
    p.add_argument('path', type=Path)

    p = sub.add_parser('upload', help='Upload a local file to an s3:// URL')
    p.add_argument('path', type=Path)
    p.add_argument('url')
    p.add_argument('--content-type', help='MIME type (default: inferred from extension)')

    p = sub.add_parser('upload-folder', help='Upload the files directly inside a folder')
    p.add_argument('folder', type=Path)
    p.add_argument('url')

    p = sub.add_parser('temp-path', help='Print a path under the temp root')
    p.add_argument('relative', nargs='?', default='')

    return parser


def run(args: argparse.Namespace, service: TransferService) -> None:
    """Dispatch a parsed command to the service."""
    if args.command == 'download':
        result = service.download_file(args.url, args.path)
        print(f"{result.path} ({result.size_bytes} bytes)")
    elif args.command == 'upload':
        result = service.upload_file(args.path, args.url, args.content_type)
        print(f"{result.url} ({result.size_bytes} bytes, {result.content_type})")
    elif args.command == 'upload-folder':
        for result in service.upload_folder(args.folder, args.url):
            print(f"{result.url} ({result.size_bytes} bytes)")
    elif args.command == 'temp-path':
        if args.relative:
            print(service.get_temp_path(args.relative))
        else:
            print(service.get_temp_folder())


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv()

    logger = get_logger(__name__)
    try:
        overrides = {}
        if args.verbose:
            overrides['log_level'] = 'DEBUG'
        if args.no_checksum:
            overrides['checksum'] = False

        settings = ConfigLoader(config_path=args.config).load(overrides=overrides)
        setup_logger('transferkit', level=settings.log_level, stream=sys.stderr)

        service = TransferService.from_settings(settings)
        run(args, service)
        return 0
    except (TransferKitError, OSError, ValueError, ClientError, BotoCoreError) as e:
        # requests exceptions are OSError subclasses
        logger.error(f"Transfer failed: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
