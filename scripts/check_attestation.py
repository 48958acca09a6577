import argparse
import logging
import sys

from provisioning_attestation import AttestationCodec, load_settings


def check_attestation(paths, config_path=None, normalize=False) -> int:
    settings = load_settings(config_path)
    logging.basicConfig(level=settings.log_level)
    codec = AttestationCodec(settings)

    failures = 0
    for path in paths:
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            failures += 1
            print(f"{path}: INVALID cannot read file: {e}")
            continue
        result = codec.try_decode(data)
        if not result.ok:
            failures += 1
            print(f"{path}: INVALID {result.error}")
            continue
        print(f"{path}: OK {result.mechanism.type.value}")
        if normalize:
            print(codec.dumps(result.mechanism))
    return 1 if failures else 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Check attestation mechanism JSON files"
    )
    parser.add_argument("paths", nargs="+", help="JSON files to check")
    parser.add_argument("--config", help="Path to a YAML settings file")
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Print the re-encoded attestation mechanism",
    )
    args = parser.parse_args(argv)
    return check_attestation(args.paths, args.config, args.normalize)


if __name__ == "__main__":
    sys.exit(main())
