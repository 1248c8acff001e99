# invoice_tracker/client/cli.py
"""
Command-line front end for the invoice board.

Usage example:
    python -m invoice_tracker.client.cli list
    python -m invoice_tracker.client.cli create --number INV-001 --client Acme \
        --amount 1250.75 --description Consulting
    python -m invoice_tracker.client.cli status 1 Paid
"""

import argparse
import sys
from datetime import date
from typing import Optional, Sequence

from invoice_tracker.client.api import InvoiceApiClient
from invoice_tracker.client.board import InvoiceBoard, ViewState
from invoice_tracker.config import configure_logging
from invoice_tracker.models.invoices import InvoiceOut, InvoiceStatus

STATUS_MARKERS = {InvoiceStatus.PAID: "[x]", InvoiceStatus.PENDING: "[ ]"}


def format_currency(amount: float) -> str:
    return f"${amount:,.2f}"


def render_invoice(invoice: InvoiceOut) -> str:
    marker = STATUS_MARKERS[invoice.status]
    return (
        f"{marker} #{invoice.id} {invoice.invoice_number}  {invoice.client_name}  "
        f"{invoice.date_issued.isoformat()}  {format_currency(invoice.amount_due)}  "
        f"{invoice.status.value}\n"
        f"      {invoice.description}  (created {invoice.created_at:%Y-%m-%d})"
    )


def render(state: ViewState) -> str:
    if state.is_loading and not state.invoices:
        return "Loading invoices..."
    if not state.invoices:
        return "No invoices yet. Create your first invoice with 'create'."
    return "\n".join(render_invoice(invoice) for invoice in state.invoices)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="invoice-board", description="Track invoices")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="show all invoices, newest first")

    create = sub.add_parser("create", help="record a new invoice")
    create.add_argument("--number", required=True, help="e.g. INV-2024-001")
    create.add_argument("--client", required=True)
    create.add_argument("--date", type=date.fromisoformat, default=None, help="YYYY-MM-DD, default today")
    create.add_argument("--amount", type=float, required=True)
    create.add_argument(
        "--status",
        choices=[s.value for s in InvoiceStatus],
        default=InvoiceStatus.PENDING.value,
    )
    create.add_argument("--description", required=True)

    status = sub.add_parser("status", help="set an invoice to Pending or Paid")
    status.add_argument("id", type=int)
    status.add_argument("status", choices=[s.value for s in InvoiceStatus])

    return parser


def run(board: InvoiceBoard, args: argparse.Namespace) -> ViewState:
    if args.command == "create":
        board.edit_form(
            invoice_number=args.number,
            client_name=args.client,
            amount_due=args.amount,
            status=args.status,
            description=args.description,
            **({"date_issued": args.date} if args.date else {}),
        )
        if board.load().error is not None:
            return board.state
        return board.submit()

    board.load()
    if args.command == "status" and board.state.error is None:
        return board.change_status(args.id, InvoiceStatus(args.status))
    return board.state


def main(argv: Optional[Sequence[str]] = None, api: Optional[InvoiceApiClient] = None) -> int:
    configure_logging("WARNING")
    args = build_parser().parse_args(argv)

    owns_api = api is None
    api = api or InvoiceApiClient()
    try:
        state = run(InvoiceBoard(api), args)
    finally:
        if owns_api:
            api.close()

    if state.error:
        print(f"Error: {state.error}", file=sys.stderr)
        return 1

    print(render(state))
    return 0


if __name__ == "__main__":
    sys.exit(main())
