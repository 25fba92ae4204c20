#!/usr/bin/env python3
import argparse
from hljs_bundle import Bundler, BundleManifest, DEFAULT_OUTPUT


def main():
    parser = argparse.ArgumentParser(
        description=f"Bundle highlight.js with the riscvasm and ldscript languages into {DEFAULT_OUTPUT}")
    parser.parse_args()

    # I/O errors are not caught; the traceback and exit status report them
    Bundler.run(BundleManifest.default())


if __name__ == "__main__":
    main()
