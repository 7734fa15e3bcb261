# docfill/cli.py
import click, json, logging, os
from .config import http_port
from .exceptions import DocfillError
from .exporter import write_attachment
from .parser import read_document
from .service import parse_values, process_document, send_document
from .tokenizer import extract_variables

def _load_values(values, values_file):
    if values_file:
        with open(values_file, "r", encoding="utf-8") as f:
            values = f.read()
    return parse_values(values)

def _read_bytes(path):
    with open(path, "rb") as f:
        return f.read()

@click.group()
@click.option('--verbose', '-v', is_flag=True, help="Log debug output.")
def cli(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

@cli.command()
@click.argument('document', type=click.Path(exists=True, dir_okay=False))
def inspect(document):
    """List the {{placeholders}} in DOCUMENT as JSON."""
    try:
        text = read_document(document)
    except DocfillError as e:
        raise click.ClickException(str(e))
    click.echo(json.dumps({"variables": extract_variables(text)}, ensure_ascii=False))

@cli.command()
@click.argument('document', type=click.Path(exists=True, dir_okay=False))
@click.option('--values', default=None, help='JSON object mapping variable names to values.')
@click.option('--values-file', type=click.Path(exists=True, dir_okay=False), default=None)
@click.option('--out', required=True, help='Directory for the processed file.')
@click.option('--prompt', is_flag=True, help='Ask for every variable that has no value.')
def fill(document, values, values_file, out, prompt):
    """Fill DOCUMENT and write processed_<name> into --out."""
    try:
        mapping = _load_values(values, values_file)
        if prompt:
            for name in extract_variables(read_document(document)):
                if name not in mapping:
                    mapping[name] = click.prompt(name or "(blank)", default="", show_default=False)
        attachment = process_document(os.path.basename(document), _read_bytes(document), mapping)
    except DocfillError as e:
        raise click.ClickException(str(e))
    path = write_attachment(attachment, out)
    click.echo(f"Wrote {path}")

@cli.command()
@click.argument('document', type=click.Path(exists=True, dir_okay=False))
@click.option('--email', 'recipient', required=True, help='Recipient address.')
@click.option('--values', default=None, help='JSON object mapping variable names to values.')
@click.option('--values-file', type=click.Path(exists=True, dir_okay=False), default=None)
def send(document, recipient, values, values_file):
    """Fill DOCUMENT and email it to --email."""
    try:
        mapping = _load_values(values, values_file)
        receipt = send_document(os.path.basename(document), _read_bytes(document), recipient, mapping)
    except DocfillError as e:
        raise click.ClickException(str(e))
    click.echo(f"Sent {receipt.filename} to {receipt.recipient} ({receipt.message_id})")

@cli.command()
@click.option('--host', default="0.0.0.0")
@click.option('--port', type=int, default=None, help='Defaults to $PORT or 3000.')
def serve(host, port):
    """Run the HTTP API."""
    import uvicorn
    from .api import app
    try:
        port = port or http_port()
    except DocfillError as e:
        raise click.ClickException(str(e))
    click.echo(f"Server running on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)

if __name__ == "__main__":
    cli()
