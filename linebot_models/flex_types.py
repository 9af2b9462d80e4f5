"""Enumerations of the values used by flex message containers and components."""

from __future__ import annotations

from enum import Enum


class FlexContainerType(str, Enum):
    BUBBLE = "bubble"
    CAROUSEL = "carousel"


class FlexComponentType(str, Enum):
    BOX = "box"
    BUTTON = "button"
    FILLER = "filler"
    ICON = "icon"
    IMAGE = "image"
    SEPARATOR = "separator"
    SPACER = "spacer"
    SPAN = "span"
    TEXT = "text"


class FlexBubbleSizeType(str, Enum):
    NANO = "nano"
    MICRO = "micro"
    KILO = "kilo"
    MEGA = "mega"
    GIGA = "giga"


class FlexBubbleDirectionType(str, Enum):
    LTR = "ltr"
    RTL = "rtl"


class FlexButtonStyleType(str, Enum):
    LINK = "link"
    PRIMARY = "primary"
    SECONDARY = "secondary"


class FlexButtonHeightType(str, Enum):
    MD = "md"
    SM = "sm"


class FlexIconAspectRatioType(str, Enum):
    RATIO_1TO1 = "1:1"
    RATIO_2TO1 = "2:1"
    RATIO_3TO1 = "3:1"


class FlexImageSizeType(str, Enum):
    XXS = "xxs"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "xxl"
    THREE_XL = "3xl"
    FOUR_XL = "4xl"
    FIVE_XL = "5xl"
    FULL = "full"


class FlexImageAspectRatioType(str, Enum):
    RATIO_1TO1 = "1:1"
    RATIO_1_51TO1 = "1.51:1"
    RATIO_1_91TO1 = "1.91:1"
    RATIO_4TO3 = "4:3"
    RATIO_16TO9 = "16:9"
    RATIO_20TO13 = "20:13"
    RATIO_2TO1 = "2:1"
    RATIO_3TO1 = "3:1"
    RATIO_3TO4 = "3:4"
    RATIO_9TO16 = "9:16"
    RATIO_1TO2 = "1:2"
    RATIO_1TO3 = "1:3"


class FlexImageAspectModeType(str, Enum):
    COVER = "cover"
    FIT = "fit"


class FlexBoxLayoutType(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    BASELINE = "baseline"


class FlexComponentPositionType(str, Enum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"


class FlexComponentSpacingType(str, Enum):
    NONE = "none"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "xxl"


class FlexComponentMarginType(str, Enum):
    NONE = "none"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "xxl"


class FlexComponentOffsetType(str, Enum):
    NONE = "none"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "xxl"


class FlexComponentPaddingType(str, Enum):
    NONE = "none"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "xxl"


class FlexComponentGravityType(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"


class FlexComponentAlignType(str, Enum):
    START = "start"
    END = "end"
    CENTER = "center"


class FlexComponentCornerRadiusType(str, Enum):
    NONE = "none"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "xxl"


class FlexIconSizeType(str, Enum):
    XXS = "xxs"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "xxl"
    THREE_XL = "3xl"
    FOUR_XL = "4xl"
    FIVE_XL = "5xl"


class FlexSpacerSizeType(str, Enum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "xxl"


class FlexTextWeightType(str, Enum):
    REGULAR = "regular"
    BOLD = "bold"


class FlexTextSizeType(str, Enum):
    XXS = "xxs"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "xxl"
    THREE_XL = "3xl"
    FOUR_XL = "4xl"
    FIVE_XL = "5xl"


class FlexTextStyleType(str, Enum):
    NORMAL = "normal"
    ITALIC = "italic"


class FlexTextDecorationType(str, Enum):
    NONE = "none"
    UNDERLINE = "underline"
    LINE_THROUGH = "line-through"


class FlexComponentJustifyContentType(str, Enum):
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class FlexComponentAlignItemsType(str, Enum):
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"


class FlexComponentAdjustModeType(str, Enum):
    SHRINK_TO_FIT = "shrink-to-fit"


class FlexBoxBackgroundType(str, Enum):
    LINEAR_GRADIENT = "linearGradient"