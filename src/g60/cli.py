#!/usr/bin/env python3
"""
G60 명령행 도구

사용법:
  g60 encode "Hello, world!"
  g60 encode --stdin < file.bin
  g60 decode Gt4CGFiHehzRzjCF16 --text
  g60 verify Gt4CGFiHehzRzjCF16
  g60 random 16
"""

import argparse
import logging
import os
import sys

from g60.codec import decode, encode
from g60.errors import G60Error
from g60.generate import random_bytes
from g60.verification import is_canonical, verify

# 환경 변수 설정
_LOG_LEVEL = os.environ.get("G60_LOG_LEVEL", "WARNING").upper()
_TEXT_ENCODING = os.environ.get("G60_TEXT_ENCODING", "utf-8")


def _cmd_encode(args) -> int:
    if args.stdin:
        data = sys.stdin.buffer.read()
    elif args.text is not None:
        data = args.text.encode(_TEXT_ENCODING)
    else:
        print("오류: TEXT 또는 --stdin 이 필요합니다.", file=sys.stderr)
        return 2
    print(encode(data))
    return 0


def _cmd_decode(args) -> int:
    data = decode(args.encoded.strip())
    if args.text:
        try:
            print(data.decode(_TEXT_ENCODING))
        except UnicodeDecodeError as e:
            print(f"오류: {_TEXT_ENCODING} 텍스트가 아닙니다 ({e})", file=sys.stderr)
            return 1
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.flush()
    return 0


def _cmd_verify(args) -> int:
    encoded = args.encoded.strip()
    verify(encoded)
    print(f"valid: {len(encoded)} symbols, canonical: {is_canonical(encoded)}")
    return 0


def _cmd_random(args) -> int:
    if args.bytes < 0:
        print("오류: BYTES는 0 이상이어야 합니다.", file=sys.stderr)
        return 2
    print(random_bytes(args.bytes))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="g60",
        description="G60 인코딩: encode / decode / verify / random",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # encode: 텍스트 또는 표준 입력 바이트를 인코딩
    p_encode = sub.add_parser("encode", help="데이터를 G60 문자열로 인코딩합니다")
    p_encode.add_argument("text", nargs="?", help="인코딩할 텍스트")
    p_encode.add_argument("--stdin", action="store_true", help="표준 입력의 바이트를 인코딩")
    p_encode.set_defaults(func=_cmd_encode)

    # decode: G60 문자열을 원래 데이터로 복원
    p_decode = sub.add_parser("decode", help="G60 문자열을 디코딩합니다")
    p_decode.add_argument("encoded", help="G60 문자열")
    p_decode.add_argument("--text", action="store_true", help="결과를 텍스트로 출력")
    p_decode.set_defaults(func=_cmd_decode)

    p_verify = sub.add_parser("verify", help="G60 문자열을 검증합니다")
    p_verify.add_argument("encoded", help="G60 문자열")
    p_verify.set_defaults(func=_cmd_verify)

    p_random = sub.add_parser("random", help="무작위 G60 문자열을 생성합니다")
    p_random.add_argument("bytes", type=int, help="원본 바이트 수")
    p_random.set_defaults(func=_cmd_random)

    return parser


def main(argv=None) -> int:
    logging.basicConfig(format="[%(levelname)s] %(message)s", level=_LOG_LEVEL)
    args = build_parser().parse_args(argv)
    logging.debug("command: %s", args.command)

    try:
        return args.func(args)
    except G60Error as e:
        print(f"오류: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
