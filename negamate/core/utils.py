import sys


def print_info(depth, move, score, nodes, elapsed, mate_score):
    nps = int(nodes / elapsed) if elapsed > 0 else 0

    if abs(score) >= mate_score:
        score_str = "king capture" if score > 0 else "king lost"
    else:
        score_str = f"{score:.2f}"

    print(
        f"{move.piece.kind.name.title()} from ({move.x0},{move.y0}) to ({move.x1},{move.y1}) "
        f"with a value of {score_str}"
    )
    print(f"info depth {depth} nodes {nodes} nps {nps} time {elapsed:.2f}s move {move.uci()}")


def progress_bar(done, total, width=40, stream=None):
    stream = stream or sys.stderr
    filled = int(width * done / total) if total else width
    bar = "#" * filled + ("-" * (width - filled))
    stream.write(f"\r[{bar}] [{done}/{total} Moves]")
    if done >= total:
        stream.write("\n")
    stream.flush()
