# Reference OkLab values for the sRGB primaries and secondaries.
samples_srgb8_oklab = {
    (0, 0, 0):       (0.000000, 0.000000, 0.000000),
    (255, 255, 255): (1.000000, 0.000000, 0.000000),
    (255, 0, 0):     (0.627955, 0.224863, 0.125846),
    (0, 255, 0):     (0.866440, -0.233888, 0.179498),
    (0, 0, 255):     (0.452014, -0.032457, -0.311528),
    (255, 255, 0):   (0.967983, -0.071369, 0.198570),
    (0, 255, 255):   (0.905399, -0.149444, -0.039398),
    (255, 0, 255):   (0.701674, 0.274566, -0.169156),
}

# OkLch (L, C, h in degrees)
samples_srgb8_oklch = {
    (255, 0, 0): (0.627955, 0.257683, 29.2339),
    (0, 255, 0): (0.866440, 0.294827, 142.4953),
    (0, 0, 255): (0.452014, 0.313214, 264.0520),
}

# 8-bit sRGB -> linear-light, per channel
samples_srgb8_linear = {
    0: 0.0,
    10: 0.0030352698,
    128: 0.2158605001,
    188: 0.5028864580,
    255: 1.0,
}

oklab_tolerance = 1e-4
hue_tolerance = 0.05
