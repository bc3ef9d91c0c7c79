import matplotlib

# headless runs: no display for the interactive backends
matplotlib.use("Agg")
