from visualize import plot_hit_miss_rate, plot_steps_distribution


def test_plot_steps_distribution(tmp_path):
    out = tmp_path / "plots" / "steps.png"
    plot_steps_distribution([(6, 8), (1, 0), (7, 16)], str(out))
    assert out.exists()


def test_plot_hit_miss_rate_handles_no_hits(tmp_path):
    out = tmp_path / "hitmiss.png"
    plot_hit_miss_rate(0, str(out), policy="none")
    assert out.exists()
