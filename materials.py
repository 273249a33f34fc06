class Material:

    def __init__(self, k_d=1.7, k_s=1.0, p=25):
        """
        Create a new material with the given parameters.

        Parameters:
          k_d : float -- Lambert (diffuse) coefficient
          k_s : float -- Specular weight
          p : int -- Specular exponent (shininess)
        """
        if k_d < 0 or k_s < 0:
            raise ValueError(f"material coefficients must be non-negative, got k_d={k_d}, k_s={k_s}")
        if p <= 0:
            raise ValueError(f"shininess exponent must be positive, got {p}")
        self.k_d = k_d
        self.k_s = k_s
        self.p = p

    def __repr__(self):
        return f"Material(k_d={self.k_d}, k_s={self.k_s}, p={self.p})"


# The coefficients the renderer has always shaded with.
DEFAULT_MATERIAL = Material()
