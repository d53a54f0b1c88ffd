import matplotlib

# Charts are written to files only
matplotlib.use("Agg")
