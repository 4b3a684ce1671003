from __future__ import annotations
import argparse, pathlib, sys, traceback
import yaml
from . import decode, write
from .config import load_config, get_default_bpm, get_output
from .errors import SmfError
from .util import log

def _bpm(text: str) -> float:
    try:
        bpm = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid tempo: {text!r}")
    if bpm == 0 or bpm != bpm:
        raise argparse.ArgumentTypeError(f"tempo must be non-zero, got {text!r}")
    return bpm

def _track_index(text: str) -> int:
    try:
        idx = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid track index: {text!r}")
    if idx < 0:
        raise argparse.ArgumentTypeError(f"track index must be >= 0, got {idx}")
    return idx

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="smfnotes", description="Print the note events of a Standard MIDI File")
    p.add_argument("infile", metavar="FILE", help="Input MIDI file (.mid)")
    p.add_argument("-t", "--tempo", dest="bpm", type=_bpm, default=None,
                   help="Fixed tempo in BPM; tempo events in the file are ignored")
    p.add_argument("-n", "--track", dest="track", type=_track_index, default=None,
                   help="Only print notes of this track (zero-based)")
    p.add_argument("--config", dest="config", default=None, help="YAML config merged over the defaults")
    p.add_argument("-v", "--verbose", action="store_true", help="Diagnostics on stderr")
    return p

def main(argv=None):
    args = build_parser().parse_args(argv)
    log.set_verbose(args.verbose)

    in_path = pathlib.Path(args.infile).expanduser().resolve()
    if not in_path.exists():
        log.error("cli", f"Input not found: {in_path}")
        sys.exit(1)

    try:
        cfg = load_config(args.config)
    except (OSError, yaml.YAMLError) as exc:
        log.error("cli", f"cannot load config {args.config}: {exc}")
        sys.exit(1)
    out = get_output(cfg)
    log.info("cli", f"infile = {in_path}")

    sink = write.line_writer(sys.stdout, sep=out["separator"], header=out["header"])
    try:
        with open(in_path, "rb") as f:
            summary = decode.decode_notes(
                f, sink,
                tempo_bpm=args.bpm,
                track=args.track,
                default_bpm=get_default_bpm(cfg),
            )
    except (SmfError, OSError) as exc:
        sys.stdout.flush()
        log.error("cli", str(exc))
        sys.exit(1)
    except Exception:
        traceback.print_exc()
        sys.exit(2)

    log.info("cli", f"Done. tracks={summary.num_tracks} notes={summary.emitted} suppressed={summary.suppressed}")
