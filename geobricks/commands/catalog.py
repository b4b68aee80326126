"""Static catalogues of enumerated GDAL option values.

Every enumeration is a ``StrEnum`` whose values are the literal tokens GDAL
expects, so members render directly into the command line. Options that
accept one of these enumerations also accept a plain string, which keeps
newer drivers and configuration keys usable without touching this module.

Example:
    >>> from geobricks.commands import catalog
    >>> str(catalog.Format.GTiff)
    'GTiff'
    >>> catalog.Resampling.CUBIC == "cubic"
    True
"""

from __future__ import annotations

import enum

_FORMAT_NAMES = (
    "AAIGrid", "ACE2", "ADRG", "AIG", "AIRSAR", "BAG", "BLX", "BMP", "BSB", "BT",
    "CEOS", "COASP", "COG", "COSAR", "CPG", "CTG", "DIMAP", "DIPEx", "DODS",
    "DOQ1", "DOQ2", "DTED", "E00GRID", "ECRGTOC", "ECW", "EHdr", "EIR", "ELAS",
    "ENVI", "EPSILON", "ERS", "ESAT", "FAST", "FIT", "FITS", "FujiBAS",
    "GENBIN", "GEORASTER", "GFF", "GIF", "GMT", "GPKG", "GRASS",
    "GRASSASCIIGrid", "GRIB", "GS7BG", "GSAG", "GSBG", "GSC", "GTX", "GTiff",
    "GXF", "HDF4", "HDF5", "HF2", "HFA", "IDA", "ILWIS", "INGR", "ISIS2",
    "ISIS3", "JAXAPALSAR", "JDEM", "JP2ECW", "JP2KAK", "JP2MrSID",
    "JP2OpenJPEG", "JPEG", "JPEG2000", "JPEGGLS", "JPIPKAK", "KMLSUPEROVERLAY",
    "L1B", "LAN", "LCP", "LOSLAS", "Leveller", "MBTiles", "MEM", "MFF", "MFF2",
    "MG4Lidar", "MSG", "MSGN", "MrSID", "NDF", "NGSGEOID", "NITF", "NTv2",
    "NWT_GRC", "OGDI", "OZI", "PAux", "PCIDSK", "PCRaster", "PDF", "PDS", "PNG",
    "PNM", "PostGISRaster", "R", "RASDAMAN", "RIK", "RMF", "RPFTOC", "RS2",
    "RST", "Rasterlite", "SAGA", "SAR_CEOS", "SDE", "SDTS", "SGI", "SNODAS",
    "SRP", "SRTMHGT", "TERRAGEN", "TIL", "TSX", "USGSDEM", "VRT", "WCS", "WEBP",
    "WMS", "XPM", "XYZ", "ZMap", "netCDF",
)

_CONFIG_KEYS = (
    "CPL_DEBUG", "CPL_LOG", "CPL_LOG_ERRORS", "CPL_TIMESTAMP",
    "CPL_MAX_ERROR_REPORTS", "CPL_ACCUM_ERROR_MSG", "CPL_TMPDIR", "GDAL_DATA",
    "GDAL_DISABLE_CPLLOCALEC", "GDAL_FILENAME_IS_UTF8", "GEOTIFF_CSV",
    "GDAL_DISABLE_READDIR_ON_OPEN", "GDAL_CACHEMAX", "GDAL_SKIP",
    "GDAL_DRIVER_PATH", "GDAL_FORCE_CACHING", "GDAL_VALIDATE_CREATION_OPTIONS",
    "GDAL_IGNORE_AXIS_ORIENTATION", "GMLJP2OVERRIDE", "GDAL_PAM_MODE",
    "GDAL_PAM_PROXY_DIR", "GDAL_MAX_DATASET_POOL_SIZE", "GDAL_NUM_THREADS",
    "GDAL_SWATH_SIZE", "USE_RRD", "GTIFF_IGNORE_READ_ERRORS", "ESRI_XML_PAM",
    "JPEG_QUALITY_OVERVIEW", "GDAL_TIFF_INTERNAL_MASK",
    "GDAL_TIFF_INTERNAL_MASK_TO_8BIT", "TIFF_USE_OVR", "GTIFF_POINT_GEO_IGNORE",
    "GTIFF_REPORT_COMPD_CS", "GDAL_ENABLE_TIFF_SPLIT", "GDAL_TIFF_OVR_BLOCKSIZE",
    "GRIB_NORMALIZE_UNITS", "PROJSO", "CENTER_LONG", "CHECK_WITH_INVERT_PROJ",
    "THRESHOLD", "OGR_DEBUG_ORGANIZE_POLYGONS", "OGR_ARC_STEPSIZE",
    "OGR_ENABLE_PARTIAL_REPROJECTION", "OGR_FORCE_ASCII", "SHAPE_ENCODING",
    "DXF_ENCODING", "GML_INVERT_AXIS_ORDER_IF_LAT_LONG",
    "GML_CONSIDER_EPSG_AS_URN", "GML_SAVE_RESOLVED_TO", "GML_SKIP_RESOLVE_ELEMS",
    "GML_FIELDTYPES", "OGR_WFS_PAGING_ALLOWED", "OGR_WFS_PAGE_SIZE",
    "OGR_WFS_LOAD_MULTIPLE_LAYER_DEFN", "OGR_EDIGEO_FONT_SIZE_FACTOR",
    "OGR_EDIGEO_CREATE_LABEL_LAYERS", "OGR_EDIGEO_RECODE_TO_UTF8",
    "COMPRESS_OVERVIEW", "INTERLEAVE_OVERVIEW", "PHOTOMETRIC_OVERVIEW",
)

# Functional API with explicit values: StrEnum would otherwise lower-case them.
Format = enum.StrEnum("Format", [(name, name) for name in _FORMAT_NAMES], module=__name__)  # type: ignore[misc]
Format.__doc__ = "Short names of GDAL raster drivers (``-of``)."

ConfigKey = enum.StrEnum("ConfigKey", [(name, name) for name in _CONFIG_KEYS], module=__name__)  # type: ignore[misc]
ConfigKey.__doc__ = "Configuration keys passed with ``--config KEY VALUE``."


class WarpOption(enum.StrEnum):
    """Keys for ``gdalwarp -wo KEY=VALUE``."""

    INIT_DEST = "INIT_DEST"
    WRITE_FLUSH = "WRITE_FLUSH"
    SKIP_NOSOURCE = "SKIP_NOSOURCE"
    UNIFIED_SRC_NODATA = "UNIFIED_SRC_NODATA"
    SAMPLE_GRID = "SAMPLE_GRID"
    SAMPLE_STEPS = "SAMPLE_STEPS"
    SOURCE_EXTRA = "SOURCE_EXTRA"
    CUTLINE = "CUTLINE"
    CUTLINE_BLEND_DIST = "CUTLINE_BLEND_DIST"
    CUTLINE_ALL_TOUCHED = "CUTLINE_ALL_TOUCHED"
    OPTIMIZE_SIZE = "OPTIMIZE_SIZE"
    NUM_THREADS = "NUM_THREADS"


class Resampling(enum.StrEnum):
    """Resampling methods (``-r``).

    ``gdalwarp`` spells nearest neighbour ``near`` while ``gdaladdo`` and
    ``gdal_retile.py`` spell it ``nearest``; both spellings are listed.
    """

    NEAR = "near"
    NEAREST = "nearest"
    BILINEAR = "bilinear"
    CUBIC = "cubic"
    CUBICSPLINE = "cubicspline"
    LANCZOS = "lanczos"
    AVERAGE = "average"
    MODE = "mode"
    GAUSS = "gauss"
    AVERAGE_MAGPHASE = "average_magphase"
    MIN = "min"
    MAX = "max"
    MED = "med"
    Q1 = "q1"
    Q3 = "q3"
    RMS = "rms"
    SUM = "sum"


class DataType(enum.StrEnum):
    """Band data types (``-ot``, ``-wt``)."""

    Byte = "Byte"
    Int8 = "Int8"
    UInt16 = "UInt16"
    Int16 = "Int16"
    UInt32 = "UInt32"
    Int32 = "Int32"
    UInt64 = "UInt64"
    Int64 = "Int64"
    Float32 = "Float32"
    Float64 = "Float64"
    CInt16 = "CInt16"
    CInt32 = "CInt32"
    CFloat32 = "CFloat32"
    CFloat64 = "CFloat64"


class Expand(enum.StrEnum):
    """``gdal_translate -expand`` modes."""

    GRAY = "gray"
    RGB = "rgb"
    RGBA = "rgba"


class VrtResolution(enum.StrEnum):
    """``gdalbuildvrt -resolution`` strategies."""

    HIGHEST = "highest"
    LOWEST = "lowest"
    AVERAGE = "average"
    USER = "user"


class TileProfile(enum.StrEnum):
    """``gdal2tiles.py -p`` tiling profiles."""

    MERCATOR = "mercator"
    GEODETIC = "geodetic"
    RASTER = "raster"


class WebViewer(enum.StrEnum):
    """``gdal2tiles.py -w`` web viewers."""

    ALL = "all"
    GOOGLE = "google"
    OPENLAYERS = "openlayers"
    LEAFLET = "leaflet"
    NONE = "none"
