r"""
Statistical distributions for the hepdists package.

Each distribution requires the definition of two vectorized numbafied functions, compiled for ``float32`` and ``float64``:

1. :func:`nb_dist_pdf(x, mu, sigma, shape, constants)`
Returns the PDF normalized on the support

2. :func:`nb_dist_cdf(x, mu, sigma, shape, constants)`
Returns the CDF derived from the PDF that is normalized on the support

NOTE: The order of the arguments of these functions follows the ordering convention from left to right: x, mu, sigma, shapes, derived constants

The derived constants (normalization, tail shapes, the cdf at the transition points) depend on the parameters only, so they are not
recomputed by the kernels. They are computed once when a distribution object is built.

Then these functions are packaged into a frozen dataclass that subclasses our own HEPContinuous. This distribution class has 4 required methods.

1. :func:`_pdf(x)`
A direct call to nb_dist_pdf with the stored constants

2. :func:`_cdf(x)`
A direct call to nb_dist_cdf with the stored constants

3. :func:`_quantile(p)`
The analytic inverse of the CDF, for probabilities strictly between 0 and 1

4. :func:`required_args`
A tuple of the required mu, sigma, and shape parameters

HEPContinuous builds the public interface on top of them: pdf, logpdf, cdf, sf, quantile (and its scipy alias ppf), rvs,
support, minimum and maximum. It checks quantile probabilities and maps 0 and 1 to the ends of the support.
"""
