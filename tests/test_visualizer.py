from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from augflow.solver import compute_max_flow, resolve_terminals  # noqa: E402
from augflow.visualizer import FlowVisualizer, to_debug_string, to_mermaid  # noqa: E402


def test_to_mermaid(single_edge):
    assert to_mermaid(single_edge) == "```mermaid\nstateDiagram-v2\ns --> t: 0/7\n```"
    s, t = resolve_terminals(single_edge, "s", "t")
    compute_max_flow(single_edge, s, t)
    assert "s --> t: 7/7\n" in to_mermaid(single_edge)


def test_to_debug_string(diamond):
    lines = to_debug_string(diamond).split("\n")
    assert lines[0] == "[0]=a, [1]=s, [2]=t, [3]=b, "
    assert lines[1:] == [
        "\ta --> t\t : 0/5",
        "\ts --> a\t : 0/10",
        "\ts --> b\t : 0/5",
        "\tb --> t\t : 0/10",
        "",
    ]


def test_draw(tmp_path, diamond):
    s, t = resolve_terminals(diamond, "s", "t")
    compute_max_flow(diamond, s, t)
    vis = FlowVisualizer(diamond)
    fig, ax = plt.subplots()
    vis.draw(ax)
    vis.draw_min_cut(ax, s)
    fig.savefig(tmp_path / "flow.png", format="PNG")
    plt.close(fig)
    assert (tmp_path / "flow.png").stat().st_size > 0
