"""Physical constants."""

R_GAS = 8.314462618  # J/(mol·K)
