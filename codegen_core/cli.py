#!/usr/bin/env python3
"""
cli.py — CLI wrapper cho code generator (đọc service từ tham số hoặc database)

Cung cấp các subcommand:
- code   : in mã current/next + timer một lần
- watch  : hiển thị mã real-time, refresh mỗi giây (Ctrl+C để thoát)
- add    : lưu service vào database
- list   : liệt kê service đã lưu kèm mã hiện tại
- next   : tăng counter HOTP của một service đã lưu

eg..:
    codegen code --secret JBSWY3DPEHPK3PXP
    codegen code --secret JBSWY3DPEHPK3PXP --type hotp --counter 5 --digits 8
    codegen watch --service 1
    codegen add --name github --secret JBSWY3DPEHPK3PXP --algorithm sha256
    codegen next --service 2
"""

import argparse
import json
import sys
import time

from . import config
from .code_generator import ServiceCodeGenerator, resolve_config
from .exceptions import CodeGeneratorError
from .models import Algorithm, AuthType, Service
from .time_provider import FixedTimeProvider, SystemTimeProvider


def _time_provider(args):
    if getattr(args, "at", None) is not None:
        return FixedTimeProvider(args.at, args.delta or 0)
    return SystemTimeProvider(residual_delta_millis=args.delta)


def _service_from_args(args) -> Service:
    if getattr(args, "service", None) is not None:
        from codegen_database import db_manager
        return db_manager.get_service(args.service, args.db)
    return Service.from_dict({
        "secret": args.secret,
        "auth_type": args.type,
        "algorithm": args.algorithm,
        "digits": args.digits,
        "period": args.period,
        "hotp_counter": args.counter,
        "name": getattr(args, "name", None),
        "issuer": getattr(args, "issuer", None),
    })


def _label(service: Service) -> str:
    if service.name:
        return f"{service.issuer}:{service.name}" if service.issuer else service.name
    return service.auth_type.name


# --- CLI command handlers ---
def cmd_code(args):
    generator = ServiceCodeGenerator(_time_provider(args))
    service = generator.generate(_service_from_args(args))
    if args.json:
        print(json.dumps(service.to_dict(), indent=2))
        return
    code = service.code
    print(f"current: {code.current}")
    print(f"next:    {code.next}")
    if service.auth_type is AuthType.TOTP:
        print(f"timer:   {code.timer}s (progress {code.progress:.2f})")


def cmd_watch(args):
    generator = ServiceCodeGenerator(_time_provider(args))
    base = _service_from_args(args)
    label = _label(base)

    print(f"[{label}] Press Ctrl+C to quit. Refreshing every second...\n")
    last_code = None
    try:
        while True:
            code = generator.generate(base).code
            if code.current != last_code:
                print(f"{label}: {code.current}  next {code.next}  (valid ~{code.timer:2d}s)")
                last_code = code.current
            else:
                # Update remaining seconds inline
                print(f".. {code.timer:2d}s left", end='\r', flush=True)
            time.sleep(1)
    except KeyboardInterrupt:
        print("\nBye.")


def cmd_add(args):
    from codegen_database import db_manager, setup_database

    setup_database(args.db)
    service = db_manager.add_service(_service_from_args(args), args.db)
    print(f"[+] Added service id={service.id} ({_label(service)})")


def cmd_list(args):
    from codegen_database import db_manager, setup_database

    setup_database(args.db)
    generator = ServiceCodeGenerator(_time_provider(args))
    services = generator.generate_all(db_manager.list_services(args.db))
    if not services:
        print("No services stored.")
        return
    for service in services:
        line = f"{service.id:>4}  {_label(service):<30} {service.code.current}"
        if service.auth_type is AuthType.TOTP:
            line += f"  ({service.code.timer:2d}s)"
        else:
            line += f"  (counter {resolve_config(service).hotp_counter})"
        print(line)


def cmd_next(args):
    from codegen_database import db_manager

    service = db_manager.get_service(args.service, args.db)
    if service.auth_type is not AuthType.HOTP:
        raise ValueError(f"Service {args.service} is not a HOTP service")
    service = db_manager.increment_hotp_counter(args.service, args.db)
    code = ServiceCodeGenerator(_time_provider(args)).generate(service).code
    print(f"HOTP(counter={service.hotp_counter}): {code.current}  next {code.next}")


def cmd_help(args):
    print("'codegen -h' for help.")


# --- Argparse builder ---
def _add_service_args(p, secret_required: bool = False):
    p.add_argument("--secret", required=secret_required, help="Base32 secret")
    p.add_argument("--type", choices=["totp", "hotp"], default="totp", help="OTP scheme")
    p.add_argument("--algorithm", type=str.upper, choices=[a.name for a in Algorithm],
                   help="HMAC digest (default SHA1)")
    p.add_argument("--digits", type=int, help="Number of digits (default 6)")
    p.add_argument("--period", type=int, help="TOTP period in seconds (default 30)")
    p.add_argument("--counter", type=int, help="HOTP counter (default 1)")


def _add_time_args(p):
    p.add_argument("--at", type=int, help="Fixed time, epoch milliseconds")
    p.add_argument("--delta", type=int, help="Clock delta (ms) applied to the timer")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="HOTP/TOTP service code generator")
    p.add_argument("--db", default=config.DATABASE_FILE, help="SQLite database file")
    p.add_argument("--verbose", action="store_true", help="Verbose output")
    sub = p.add_subparsers(dest="cmd")
    p.set_defaults(func=cmd_help)

    # code
    pc = sub.add_parser("code", help="Print current and next code once")
    _add_service_args(pc)
    pc.add_argument("--service", type=int, help="Use a stored service instead of --secret")
    pc.add_argument("--json", action="store_true", help="Print the service as JSON")
    _add_time_args(pc)
    pc.set_defaults(func=cmd_code)

    # watch
    pw = sub.add_parser("watch", help="Show codes in real time")
    _add_service_args(pw)
    pw.add_argument("--service", type=int, help="Use a stored service instead of --secret")
    pw.add_argument("--delta", type=int, help="Clock delta (ms) applied to the timer")
    pw.set_defaults(func=cmd_watch)

    # add
    pa = sub.add_parser("add", help="Store a service")
    pa.add_argument("--name", required=True, help="Account label")
    pa.add_argument("--issuer", help="Issuer label")
    _add_service_args(pa, secret_required=True)
    pa.set_defaults(func=cmd_add)

    # list
    pl = sub.add_parser("list", help="List stored services with codes")
    _add_time_args(pl)
    pl.set_defaults(func=cmd_list)

    # next
    pn = sub.add_parser("next", help="Advance the HOTP counter of a stored service")
    pn.add_argument("--service", type=int, required=True)
    pn.add_argument("--delta", type=int, help=argparse.SUPPRESS)
    pn.set_defaults(func=cmd_next)

    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config.configure_logging(args.verbose)
    try:
        args.func(args)
    except (CodeGeneratorError, ValueError) as e:
        print(f"[!] {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
