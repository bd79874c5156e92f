"""Small numerical experiments: ODE integration, linear solving, diffusion, neural nets and graph layout."""

__version__ = "0.1.0"
__all__ = ["euler", "gaussian", "diffusion", "neuralnet", "graphs"]