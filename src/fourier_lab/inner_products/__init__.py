from fourier_lab.inner_products.quadrature import integrate, oversample, required_points

__all__ = ["integrate", "oversample", "required_points"]
