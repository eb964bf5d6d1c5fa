"""
vrpose package.

Rigid 3x4 pose algebra for VR tracking data:
- Vector and transform operators (compose, translate, rotate, blend)
- Euler and quaternion conversion with gimbal-lock handling
- Tracking -> engine coordinate convention conversion
- Chaperone bounds offsetting with floor pinning
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
