# topmark:header:start
#
#   project      : SvgScribe
#   file         : filters.py
#   file_relpath : src/svgscribe/emitter/filters.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Filter effects: the filter container, filter primitives and CSS-like shortcuts.

Most primitives take a [`Filterspec`][svgscribe.core.types.Filterspec] as
their first argument for the shared ``in``/``in2``/``result`` attributes.

Out-of-range or unknown parameters never raise. Each primitive substitutes its
own fallback value and carries on:

- hue rotation outside [-360, 360] becomes 0;
- saturation outside [0, 1] becomes 1;
- negative blur deviations become 0;
- turbulence base frequencies outside [0, 1] become 0;
- unknown blend modes, composite and morphology operators and channel names
  become ``normal``, ``over``, ``erode`` and ``R``.

Reference: https://www.w3.org/TR/SVG11/filters.html
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Final

from svgscribe.config.logging import get_logger
from svgscribe.constants import EMPTY_CLOSE
from svgscribe.core import formatting as fmt
from svgscribe.core.keywords import (
    BlendMode,
    CompositeOperator,
    MorphologyOperator,
    TurbulenceType,
    imgchannel,
)
from svgscribe.core.types import Filterspec
from svgscribe.emitter.base import Emitter

if TYPE_CHECKING:
    from svgscribe.config.logging import SvgscribeLogger
    from svgscribe.core.types import Number, StyleArgs

logger: SvgscribeLogger = get_logger(__name__)

COLOR_MATRIX_SIZE: Final[int] = 20
KERNEL_MATRIX_SIZE: Final[int] = 9

SEPIA_MATRIX: Final[tuple[float, ...]] = (
    0.280, 0.450, 0.05, 0, 0,
    0.140, 0.390, 0.04, 0, 0,
    0.080, 0.280, 0.03, 0, 0,
    0, 0, 0, 1, 0,
)  # fmt: skip

_NO_SPEC: Final[Filterspec] = Filterspec()


def _coerced(kind: str, raw: str, used: str) -> None:
    if raw != used:
        logger.debug("%s %r not recognized; using %r", kind, raw, used)


def _clamped(kind: str, raw: float, used: float) -> float:
    if raw != used:
        logger.debug("%s %s out of range; using %s", kind, raw, used)
    return used


class FiltersMixin(Emitter):
    """Filter container, primitives and convenience filters."""

    def filter(self, filter_id: str, style: StyleArgs = ()) -> None:
        """Begin a filter. End with ``fend()``."""
        self.write(f'<filter id="{filter_id}" ' + fmt.compose_attributes(style, ">\n"))

    def fend(self) -> None:
        self.write_line("</filter>")

    def _primitive(
        self, tag: str, fs: Filterspec, attrs: str, style: StyleArgs, closing: str
    ) -> None:
        self.write(
            f"<{tag} {fmt.compose_filter_attributes(fs)}{attrs} "
            + fmt.compose_attributes(style, closing)
        )

    # --- Primitives ---

    def fe_blend(self, fs: Filterspec, mode: str, style: StyleArgs = ()) -> None:
        blend: BlendMode = BlendMode.coerce(mode, case_insensitive=False)
        _coerced("blend mode", mode, blend.value)
        self._primitive("feBlend", fs, f'mode="{blend.value}"', style, EMPTY_CLOSE)

    def fe_color_matrix(
        self, fs: Filterspec, values: Sequence[float], style: StyleArgs = ()
    ) -> None:
        """Color matrix primitive with a full 4x5 matrix.

        Raises:
            ValueError: If ``values`` does not hold exactly 20 numbers.
        """
        if len(values) != COLOR_MATRIX_SIZE:
            raise ValueError(
                f"color matrix needs {COLOR_MATRIX_SIZE} values, got {len(values)}"
            )
        self.write(f'<feColorMatrix {fmt.compose_filter_attributes(fs)}type="matrix" values="')
        for v in values:
            self.write(fmt.format_number(v) + " ")
        self.write('" ' + fmt.compose_attributes(style, EMPTY_CLOSE))

    def fe_color_matrix_hue(self, fs: Filterspec, value: float, style: StyleArgs = ()) -> None:
        """Hue rotation by ``value`` degrees; values outside [-360, 360] become 0."""
        if value < -360 or value > 360:
            value = _clamped("hue rotation", value, 0)
        self._primitive(
            "feColorMatrix",
            fs,
            f'type="hueRotate" values="{fmt.format_number(value)}"',
            style,
            EMPTY_CLOSE,
        )

    def fe_color_matrix_saturate(
        self, fs: Filterspec, value: float, style: StyleArgs = ()
    ) -> None:
        """Saturation by ``value``; values outside [0, 1] become 1."""
        if value < 0 or value > 1:
            value = _clamped("saturation", value, 1)
        self._primitive(
            "feColorMatrix",
            fs,
            f'type="saturate" values="{fmt.format_number(value)}"',
            style,
            EMPTY_CLOSE,
        )

    def fe_color_matrix_luminance(self, fs: Filterspec, style: StyleArgs = ()) -> None:
        self._primitive("feColorMatrix", fs, 'type="luminanceToAlpha"', style, EMPTY_CLOSE)

    def fe_component_transfer(self) -> None:
        """Begin a component transfer. Fill with ``fe_func_*``; end with ``fe_comp_end()``."""
        self.write_line("<feComponentTransfer>")

    def fe_comp_end(self) -> None:
        self.write_line("</feComponentTransfer>")

    def fe_composite(
        self,
        fs: Filterspec,
        operator: str,
        k1: Number,
        k2: Number,
        k3: Number,
        k4: Number,
        style: StyleArgs = (),
    ) -> None:
        op: CompositeOperator = CompositeOperator.coerce(operator, case_insensitive=False)
        _coerced("composite operator", operator, op.value)
        ks: str = " ".join(
            f'k{i}="{fmt.format_number(k)}"' for i, k in enumerate((k1, k2, k3, k4), start=1)
        )
        self._primitive("feComposite", fs, f'operator="{op.value}" {ks}', style, EMPTY_CLOSE)

    def fe_convolve_matrix(
        self, fs: Filterspec, matrix: Sequence[int], style: StyleArgs = ()
    ) -> None:
        """Convolution with a 3x3 kernel.

        Raises:
            ValueError: If ``matrix`` does not hold exactly 9 numbers.
        """
        if len(matrix) != KERNEL_MATRIX_SIZE:
            raise ValueError(f"kernel matrix needs {KERNEL_MATRIX_SIZE} values, got {len(matrix)}")
        self._primitive(
            "feConvolveMatrix",
            fs,
            f'kernelMatrix="{fmt.format_numbers(matrix)}"',
            style,
            EMPTY_CLOSE,
        )

    def fe_diffuse_lighting(
        self, fs: Filterspec, scale: float, constant: float, style: StyleArgs = ()
    ) -> None:
        """Begin a diffuse lighting container for a light source. End with ``fe_diff_end()``."""
        self._primitive(
            "feDiffuseLighting",
            fs,
            f'surfaceScale="{fmt.format_number(scale)}" '
            f'diffuseConstant="{fmt.format_number(constant)}"',
            style,
            ">",
        )

    def fe_diff_end(self) -> None:
        self.write_line("</feDiffuseLighting>")

    def fe_displacement_map(
        self,
        fs: Filterspec,
        scale: float,
        xchannel: str,
        ychannel: str,
        style: StyleArgs = (),
    ) -> None:
        """Displace ``in`` by the channels of ``in2``.

        Both ``xchannel`` and ``ychannel`` are normalized with `imgchannel`, so
        ``"green"`` is written as ``G`` on either axis. Other primitives keep
        their own per-parameter rules; this one applies the same rule to both
        selectors so the element is always valid.
        """
        self._primitive(
            "feDisplacementMap",
            fs,
            f'scale="{fmt.format_number(scale)}" '
            f'xChannelSelector="{imgchannel(xchannel)}" yChannelSelector="{imgchannel(ychannel)}"',
            style,
            EMPTY_CLOSE,
        )

    def fe_distant_light(
        self, fs: Filterspec, azimuth: float, elevation: float, style: StyleArgs = ()
    ) -> None:
        self._primitive(
            "feDistantLight",
            fs,
            f'azimuth="{fmt.format_number(azimuth)}" elevation="{fmt.format_number(elevation)}"',
            style,
            EMPTY_CLOSE,
        )

    def fe_flood(self, fs: Filterspec, color: str, opacity: float, style: StyleArgs = ()) -> None:
        self._primitive(
            "feFlood",
            fs,
            f'flood-color="{color}" flood-opacity="{fmt.format_number(opacity)}"',
            style,
            EMPTY_CLOSE,
        )

    # feFunc{R,G,B,A} children of feComponentTransfer

    def fe_func_linear(self, channel: str, slope: float, intercept: float) -> None:
        self.write(
            f'<feFunc{imgchannel(channel)} type="linear" slope="{fmt.format_number(slope)}" '
            f'intercept="{fmt.format_number(intercept)}"{EMPTY_CLOSE}'
        )

    def fe_func_gamma(self, channel: str, amplitude: float, exponent: float, offset: float) -> None:
        self.write(
            f'<feFunc{imgchannel(channel)} type="gamma" amplitude="{fmt.format_number(amplitude)}" '
            f'exponent="{fmt.format_number(exponent)}" offset="{fmt.format_number(offset)}"'
            f"{EMPTY_CLOSE}"
        )

    def fe_func_table(self, channel: str, table: Sequence[float]) -> None:
        self.write(f'<feFunc{imgchannel(channel)} type="table"')
        self._table_values("tableValues", table)

    def fe_func_discrete(self, channel: str, table: Sequence[float]) -> None:
        self.write(f'<feFunc{imgchannel(channel)} type="discrete"')
        self._table_values("tableValues", table)

    def _table_values(self, attr: str, values: Sequence[float]) -> None:
        self.write(f' {attr}="{fmt.format_numbers(values)}"{EMPTY_CLOSE}')

    def fe_gaussian_blur(
        self, fs: Filterspec, stdx: float, stdy: float, style: StyleArgs = ()
    ) -> None:
        """Gaussian blur; negative deviations become 0."""
        if stdx < 0:
            stdx = _clamped("blur deviation", stdx, 0)
        if stdy < 0:
            stdy = _clamped("blur deviation", stdy, 0)
        self._primitive(
            "feGaussianBlur",
            fs,
            f'stdDeviation="{fmt.format_number(stdx)} {fmt.format_number(stdy)}"',
            style,
            EMPTY_CLOSE,
        )

    def fe_image(self, link: str, result: str, style: StyleArgs = ()) -> None:
        self.write(
            f'<feImage xlink:href="{link}" result="{result}" '
            + fmt.compose_attributes(style, EMPTY_CLOSE)
        )

    def fe_merge(self, nodes: Sequence[str]) -> None:
        """Merge the named results, in order."""
        self.write_line("<feMerge>")
        for node in nodes:
            self.write(f'<feMergeNode in="{node}"/>\n')
        self.write_line("</feMerge>")

    def fe_morphology(
        self,
        fs: Filterspec,
        operator: str,
        xradius: float,
        yradius: float,
        style: StyleArgs = (),
    ) -> None:
        op: MorphologyOperator = MorphologyOperator.coerce(operator, case_insensitive=False)
        _coerced("morphology operator", operator, op.value)
        self._primitive(
            "feMorphology",
            fs,
            f'operator="{op.value}" '
            f'radius="{fmt.format_number(xradius)} {fmt.format_number(yradius)}"',
            style,
            EMPTY_CLOSE,
        )

    def fe_offset(self, fs: Filterspec, dx: Number, dy: Number, style: StyleArgs = ()) -> None:
        self._primitive(
            "feOffset",
            fs,
            f'dx="{fmt.format_number(dx)}" dy="{fmt.format_number(dy)}"',
            style,
            EMPTY_CLOSE,
        )

    def fe_point_light(self, x: float, y: float, z: float, style: StyleArgs = ()) -> None:
        self.write(
            f'<fePointLight x="{fmt.format_number(x)}" y="{fmt.format_number(y)}" '
            f'z="{fmt.format_number(z)}" ' + fmt.compose_attributes(style, EMPTY_CLOSE)
        )

    def fe_specular_lighting(
        self,
        fs: Filterspec,
        scale: float,
        constant: float,
        exponent: int,
        color: str,
        style: StyleArgs = (),
    ) -> None:
        """Begin a specular lighting container for a light source. End with ``fe_spec_end()``."""
        self._primitive(
            "feSpecularLighting",
            fs,
            f'surfaceScale="{fmt.format_number(scale)}" '
            f'specularConstant="{fmt.format_number(constant)}" '
            f'specularExponent="{fmt.format_number(exponent)}" lighting-color="{color}"',
            style,
            ">\n",
        )

    def fe_spec_end(self) -> None:
        self.write_line("</feSpecularLighting>")

    def fe_spot_light(
        self,
        fs: Filterspec,
        x: float,
        y: float,
        z: float,
        px: float,
        py: float,
        pz: float,
        style: StyleArgs = (),
    ) -> None:
        """Spot light at ``(x, y, z)`` pointing at ``(px, py, pz)``."""
        self._primitive(
            "feSpotLight",
            fs,
            f'x="{fmt.format_number(x)}" y="{fmt.format_number(y)}" z="{fmt.format_number(z)}" '
            f'pointsAtX="{fmt.format_number(px)}" pointsAtY="{fmt.format_number(py)}" '
            f'pointsAtZ="{fmt.format_number(pz)}"',
            style,
            EMPTY_CLOSE,
        )

    def fe_tile(self, fs: Filterspec, style: StyleArgs = ()) -> None:
        self.write(
            f"<feTile {fmt.compose_filter_attributes(fs)}"
            + fmt.compose_attributes(style, EMPTY_CLOSE)
        )

    def fe_turbulence(
        self,
        fs: Filterspec,
        ftype: str,
        bfx: float,
        bfy: float,
        octaves: int,
        seed: int,
        stitch: bool,
        style: StyleArgs = (),
    ) -> None:
        """Turbulence or fractal noise.

        ``ftype`` starting with ``f``/``F`` selects fractal noise; anything else
        turbulence. Base frequencies outside [0, 1] become 0.
        """
        if bfx < 0 or bfx > 1:
            bfx = _clamped("base frequency", bfx, 0)
        if bfy < 0 or bfy > 1:
            bfy = _clamped("base frequency", bfy, 0)
        kind: TurbulenceType = TurbulenceType.from_initial(ftype)
        stitch_tiles: str = "stitch" if stitch else "noStitch"
        self._primitive(
            "feTurbulence",
            fs,
            f'type="{kind.value}" baseFrequency="{bfx:.2f} {bfy:.2f}" '
            f'numOctaves="{octaves}" seed="{seed}" stitchTiles="{stitch_tiles}"',
            style,
            EMPTY_CLOSE,
        )

    # --- Shortcuts modeled after the CSS filter functions ---

    def blur(self, p: float) -> None:
        self.fe_gaussian_blur(_NO_SPEC, p, p)

    def brightness(self, p: float) -> None:
        self.fe_component_transfer()
        for channel in ("R", "G", "B"):
            self.fe_func_linear(channel, p, 0)
        self.fe_comp_end()

    def grayscale(self) -> None:
        self.fe_color_matrix_saturate(_NO_SPEC, 0)

    def hue_rotate(self, a: float) -> None:
        self.fe_color_matrix_hue(_NO_SPEC, a)

    def invert(self) -> None:
        self.fe_component_transfer()
        for channel in ("R", "G", "B"):
            self.fe_func_table(channel, (1, 0))
        self.fe_comp_end()

    def saturate(self, p: float) -> None:
        self.fe_color_matrix_saturate(_NO_SPEC, p)

    def sepia(self) -> None:
        self.fe_color_matrix(_NO_SPEC, SEPIA_MATRIX)
