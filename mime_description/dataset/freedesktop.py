"""
mime_description/dataset/freedesktop.py

English MIME type descriptions from the freedesktop.org shared-mime-info
database (https://gitlab.freedesktop.org/xdg/shared-mime-info).

Keys are canonical MIME types, values are the ``<comment>`` of each type with
its first letter capitalised. Aliases point at the description of their
canonical type.
"""

DESCRIPTIONS = {
    # ── application/* ──────────────────────────────────────────────────────────
    "application/andrew-inset": "ATK inset",
    "application/annodex": "Annodex exchange format",
    "application/atom+xml": "Atom syndication feed",
    "application/dicom": "DICOM image",
    "application/ecmascript": "ECMAScript program",
    "application/epub+zip": "Electronic book document",
    "application/geo+json": "GeoJSON geospatial data",
    "application/gnunet-directory": "GNUnet search file",
    "application/gpx+xml": "GPS Exchange Format",
    "application/gzip": "Gzip archive",
    "application/illustrator": "Adobe Illustrator document",
    "application/java-archive": "Java archive",
    "application/javascript": "JavaScript program",
    "application/jrd+json": "JRD document",
    "application/json": "JSON document",
    "application/json-patch+json": "JSON patch",
    "application/ld+json": "JSON-LD document",
    "application/mac-binhex40": "Macintosh BinHex-encoded file",
    "application/mathematica": "Mathematica Notebook",
    "application/mathml+xml": "MathML document",
    "application/mbox": "Mailbox file",
    "application/metalink+xml": "Metalink file",
    "application/metalink4+xml": "Metalink file",
    "application/msword": "Word document",
    "application/msword-template": "Word template",
    "application/mxf": "MXF video",
    "application/octet-stream": "Unknown",
    "application/oda": "ODA document",
    "application/ogg": "Ogg multimedia file",
    "application/oxps": "XPS document",
    "application/pdf": "PDF document",
    "application/pgp-encrypted": "PGP/MIME-encrypted message header",
    "application/pgp-keys": "PGP keys",
    "application/pgp-signature": "Detached OpenPGP signature",
    "application/pkcs10": "PKCS#10 certification request",
    "application/pkcs12": "PKCS#12 certificate bundle",
    "application/pkcs7-mime": "PKCS#7 message or certificate",
    "application/pkcs7-signature": "Detached S/MIME signature",
    "application/pkcs8": "PKCS#8 private key",
    "application/pkcs8-encrypted": "PKCS#8 private key",
    "application/pkix-cert": "X.509 certificate",
    "application/pkix-crl": "Certificate revocation list",
    "application/pkix-pkipath": "PkiPath certification path",
    "application/postscript": "PS document",
    "application/prs.plucker": "Plucker document",
    "application/raml+yaml": "RAML document",
    "application/relax-ng-compact-syntax": "RELAX NG XML schema",
    "application/rss+xml": "RSS summary",
    "application/rtf": "RTF document",
    "application/sdp": "SDP multicast stream file",
    "application/sieve": "Sieve mail filter script",
    "application/smil+xml": "SMIL document",
    "application/sql": "SQL code",
    "application/toml": "TOML file",
    "application/vnd.android.package-archive": "Android package",
    "application/vnd.apple.mpegurl": "HTTP Live Streaming playlist",
    "application/vnd.appimage": "AppImage application bundle",
    "application/vnd.debian.binary-package": "Debian package",
    "application/vnd.flatpak": "Flatpak application",
    "application/vnd.flatpak.ref": "Flatpak repository reference",
    "application/vnd.flatpak.repo": "Flatpak repository description",
    "application/vnd.google-earth.kml+xml": "KML geographic data",
    "application/vnd.google-earth.kmz": "KML geographic compressed data",
    "application/vnd.iccprofile": "ICC profile",
    "application/vnd.lotus-1-2-3": "Lotus 1-2-3 spreadsheet",
    "application/vnd.mozilla.xul+xml": "XUL interface document",
    "application/vnd.ms-access": "JET database",
    "application/vnd.ms-cab-compressed": "Microsoft Cabinet archive",
    "application/vnd.ms-excel": "Excel spreadsheet",
    "application/vnd.ms-excel.addin.macroenabled.12": "Excel add-in",
    "application/vnd.ms-excel.sheet.binary.macroenabled.12": "Excel 2007 binary spreadsheet",
    "application/vnd.ms-excel.sheet.macroenabled.12": "Excel spreadsheet",
    "application/vnd.ms-excel.template.macroenabled.12": "Excel spreadsheet template",
    "application/vnd.ms-htmlhelp": "CHM document",
    "application/vnd.ms-outlook": "Outlook Message",
    "application/vnd.ms-powerpoint": "PowerPoint presentation",
    "application/vnd.ms-powerpoint.addin.macroenabled.12": "PowerPoint add-in",
    "application/vnd.ms-powerpoint.presentation.macroenabled.12": "PowerPoint presentation",
    "application/vnd.ms-powerpoint.slideshow.macroenabled.12": "PowerPoint presentation",
    "application/vnd.ms-powerpoint.template.macroenabled.12": "PowerPoint presentation template",
    "application/vnd.ms-publisher": "Microsoft Publisher document",
    "application/vnd.ms-tnef": "TNEF message",
    "application/vnd.ms-visio.drawing.main+xml": "Microsoft Visio Drawing",
    "application/vnd.ms-word.document.macroenabled.12": "Word document",
    "application/vnd.ms-word.template.macroenabled.12": "Word document template",
    "application/vnd.ms-works": "Microsoft Works document",
    "application/vnd.ms-wpl": "WPL playlist",
    "application/vnd.ms-xpsdocument": "XPS document",
    "application/vnd.oasis.opendocument.chart": "ODC chart",
    "application/vnd.oasis.opendocument.chart-template": "ODC template",
    "application/vnd.oasis.opendocument.database": "ODB database",
    "application/vnd.oasis.opendocument.formula": "ODF formula",
    "application/vnd.oasis.opendocument.formula-template": "ODF template",
    "application/vnd.oasis.opendocument.graphics": "ODG drawing",
    "application/vnd.oasis.opendocument.graphics-flat-xml": "ODG drawing (Flat XML)",
    "application/vnd.oasis.opendocument.graphics-template": "ODG template",
    "application/vnd.oasis.opendocument.image": "ODI image",
    "application/vnd.oasis.opendocument.presentation": "ODP presentation",
    "application/vnd.oasis.opendocument.presentation-flat-xml": "ODP presentation (Flat XML)",
    "application/vnd.oasis.opendocument.presentation-template": "ODP template",
    "application/vnd.oasis.opendocument.spreadsheet": "ODS spreadsheet",
    "application/vnd.oasis.opendocument.spreadsheet-flat-xml": "ODS spreadsheet (Flat XML)",
    "application/vnd.oasis.opendocument.spreadsheet-template": "ODS template",
    "application/vnd.oasis.opendocument.text": "ODT document",
    "application/vnd.oasis.opendocument.text-flat-xml": "ODT document (Flat XML)",
    "application/vnd.oasis.opendocument.text-master": "ODM document",
    "application/vnd.oasis.opendocument.text-template": "ODT template",
    "application/vnd.oasis.opendocument.text-web": "OTH template",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation": "PowerPoint 2007 presentation",
    "application/vnd.openxmlformats-officedocument.presentationml.slide": "PowerPoint 2007 slide",
    "application/vnd.openxmlformats-officedocument.presentationml.slideshow": "PowerPoint 2007 show",
    "application/vnd.openxmlformats-officedocument.presentationml.template": "PowerPoint 2007 presentation template",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": "Excel 2007 spreadsheet",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.template": "Excel 2007 spreadsheet template",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "Word 2007 document",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.template": "Word 2007 document template",
    "application/vnd.rar": "RAR archive",
    "application/vnd.rn-realmedia": "RealMedia document",
    "application/vnd.snap": "Snap package",
    "application/vnd.sqlite3": "SQLite3 database",
    "application/vnd.sun.xml.calc": "OpenOffice Calc spreadsheet",
    "application/vnd.sun.xml.draw": "OpenOffice Draw drawing",
    "application/vnd.sun.xml.impress": "OpenOffice Impress presentation",
    "application/vnd.sun.xml.writer": "OpenOffice Writer document",
    "application/vnd.tcpdump.pcap": "Network Packet Capture",
    "application/vnd.visio": "Microsoft Visio Drawing",
    "application/vnd.wordperfect": "WordPerfect document",
    "application/vnd.youtube.yt": "YouTube Media Archive",
    "application/wasm": "WebAssembly module",
    "application/winhlp": "WinHelp help file",
    "application/x-7z-compressed": "7-zip archive",
    "application/x-abiword": "AbiWord document",
    "application/x-ace": "ACE archive",
    "application/x-alz": "Alzip archive",
    "application/x-apple-diskimage": "Apple disk image",
    "application/x-applix-spreadsheet": "Applix Spreadsheets spreadsheet",
    "application/x-applix-word": "Applix Words document",
    "application/x-archive": "AR archive",
    "application/x-arj": "ARJ archive",
    "application/x-asp": "ASP page",
    "application/x-awk": "AWK script",
    "application/x-bcpio": "BCPIO document",
    "application/x-bittorrent": "BitTorrent seed file",
    "application/x-blender": "Blender scene",
    "application/x-bzip": "Bzip archive",
    "application/x-bzip-compressed-tar": "Tar archive (bzip-compressed)",
    "application/x-bzip2": "Bzip2 archive",
    "application/x-cbr": "Comic book archive",
    "application/x-cbz": "Comic book archive",
    "application/x-cd-image": "Raw CD image",
    "application/x-cdrdao-toc": "CD Table Of Contents",
    "application/x-compress": "UNIX-compressed file",
    "application/x-compressed-tar": "Tar archive (gzip-compressed)",
    "application/x-cpio": "CPIO archive",
    "application/x-csh": "C shell script",
    "application/x-cue": "CD image cuesheet",
    "application/x-deb": "Debian package",
    "application/x-desktop": "Desktop configuration file",
    "application/x-dia-diagram": "Dia diagram",
    "application/x-dvi": "TeX DVI document",
    "application/x-e-theme": "Enlightenment theme",
    "application/x-executable": "Executable",
    "application/x-fictionbook+xml": "FictionBook document",
    "application/x-fluid": "FLTK Fluid file",
    "application/x-font-afm": "Adobe font metrics",
    "application/x-font-bdf": "BDF font",
    "application/x-font-pcf": "PCF font",
    "application/x-font-type1": "PostScript type-1 font",
    "application/x-gameboy-rom": "Game Boy ROM",
    "application/x-gba-rom": "Game Boy Advance ROM",
    "application/x-gettext-translation": "Translated messages (machine-readable)",
    "application/x-glade": "Glade project",
    "application/x-gnumeric": "Gnumeric spreadsheet",
    "application/x-gtar": "Tar archive",
    "application/x-hdf": "HDF document",
    "application/x-iso9660-appimage": "AppImage application bundle",
    "application/x-java": "Java class",
    "application/x-java-jnlp-file": "JNLP file",
    "application/x-java-keystore": "Java keystore",
    "application/x-jbuilder-project": "JBuilder project",
    "application/x-killustrator": "KIllustrator drawing",
    "application/x-kspread": "KSpread spreadsheet",
    "application/x-kword": "KWord document",
    "application/x-lha": "LHA archive",
    "application/x-lzip": "Lzip archive",
    "application/x-lzma": "LZMA archive",
    "application/x-lzma-compressed-tar": "Tar archive (LZMA-compressed)",
    "application/x-m4": "M4 macro",
    "application/x-matroska": "Matroska video",
    "application/x-mobipocket-ebook": "Mobipocket e-book",
    "application/x-ms-dos-executable": "DOS/Windows executable",
    "application/x-ms-shortcut": "Windows link",
    "application/x-msdownload": "Windows executable",
    "application/x-msi": "Windows Installer package",
    "application/x-n64-rom": "Nintendo64 ROM",
    "application/x-nes-rom": "NES ROM",
    "application/x-netcdf": "Unidata NetCDF document",
    "application/x-object": "Object code",
    "application/x-ole-storage": "OLE2 compound document storage",
    "application/x-pak": "PAK archive",
    "application/x-perl": "Perl script",
    "application/x-php": "PHP script",
    "application/x-pkcs12": "PKCS#12 certificate bundle",
    "application/x-pkcs7-certificates": "PKCS#7 certificate bundle",
    "application/x-python-bytecode": "Python bytecode",
    "application/x-qemu-disk": "QEMU virtual disk",
    "application/x-qtiplot": "QtiPlot document",
    "application/x-rar": "RAR archive",
    "application/x-rar-compressed": "RAR archive",
    "application/x-riff": "RIFF container",
    "application/x-rpm": "RPM package",
    "application/x-ruby": "Ruby script",
    "application/x-sega-cd-rom": "Sega CD disc image",
    "application/x-shar": "Shell archive",
    "application/x-sharedlib": "Shared library",
    "application/x-shellscript": "Shell script",
    "application/x-shockwave-flash": "Shockwave Flash file",
    "application/x-sqlite3": "SQLite3 database",
    "application/x-stuffit": "StuffIt archive",
    "application/x-subrip": "SubRip subtitles",
    "application/x-sv4cpio": "SV4 CPIO archive",
    "application/x-sv4crc": "SV4 CPIO archive (with CRC)",
    "application/x-tar": "Tar archive",
    "application/x-tarz": "Tar archive (compressed)",
    "application/x-tex-gf": "TeX font",
    "application/x-tex-pk": "TeX font",
    "application/x-tgif": "TGIF document",
    "application/x-theme": "Theme",
    "application/x-trash": "Backup file",
    "application/x-troff-man": "Troff ME input document",
    "application/x-tzo": "Tar archive (LZO-compressed)",
    "application/x-ustar": "Ustar archive",
    "application/x-virtualbox-vdi": "VirtualBox virtual disk",
    "application/x-virtualbox-vmdk": "VMware virtual disk",
    "application/x-wais-source": "WAIS source code",
    "application/x-wpg": "WordPerfect/Drawperfect image",
    "application/x-x509-ca-cert": "DER/PEM/Netscape-encoded X.509 certificate",
    "application/x-xar": "XAR archive",
    "application/x-xliff": "XLIFF translation file",
    "application/x-xpinstall": "XPInstall installer module",
    "application/x-xz": "XZ archive",
    "application/x-xz-compressed-tar": "Tar archive (XZ-compressed)",
    "application/x-yaml": "YAML document",
    "application/x-zerosize": "Empty document",
    "application/x-zoo": "Zoo archive",
    "application/x-zstd-compressed-tar": "Tar archive (Zstandard-compressed)",
    "application/xhtml+xml": "XHTML page",
    "application/xml": "XML document",
    "application/xml-dtd": "DTD file",
    "application/xml-external-parsed-entity": "XML entities document",
    "application/xslt+xml": "XSLT stylesheet",
    "application/xspf+xml": "XSPF playlist",
    "application/yaml": "YAML document",
    "application/zip": "Zip archive",
    "application/zstd": "Zstandard archive",

    # ── audio/* ────────────────────────────────────────────────────────────────
    "audio/aac": "AAC audio",
    "audio/ac3": "Dolby Digital audio",
    "audio/aiff": "AIFF/Amiga/Mac audio",
    "audio/amr": "AMR audio",
    "audio/amr-wb": "AMR-WB audio",
    "audio/basic": "ULAW (Sun) audio",
    "audio/flac": "FLAC audio",
    "audio/midi": "MIDI audio",
    "audio/mp2": "MP2 audio",
    "audio/mp4": "MPEG-4 audio",
    "audio/mpeg": "MP3 audio",
    "audio/ogg": "Ogg Audio",
    "audio/opus": "Opus audio",
    "audio/vnd.dts": "DTS audio",
    "audio/vnd.rn-realaudio": "RealAudio document",
    "audio/vnd.wave": "WAV audio",
    "audio/wav": "WAV audio",
    "audio/webm": "WebM audio",
    "audio/x-aiff": "AIFF/Amiga/Mac audio",
    "audio/x-ape": "Monkey's audio",
    "audio/x-flac": "FLAC audio",
    "audio/x-flac+ogg": "Ogg FLAC audio",
    "audio/x-it": "Impulse Tracker audio",
    "audio/x-m4b": "MPEG-4 audio book",
    "audio/x-matroska": "Matroska audio",
    "audio/x-mod": "Amiga SoundTracker audio",
    "audio/x-mpegurl": "MP3 audio (streamed)",
    "audio/x-ms-asx": "Microsoft ASX playlist",
    "audio/x-ms-wma": "Windows Media audio",
    "audio/x-musepack": "Musepack audio",
    "audio/x-opus+ogg": "Opus audio",
    "audio/x-s3m": "Scream Tracker 3 audio",
    "audio/x-scpls": "MP3 ShoutCast playlist",
    "audio/x-speex": "Speex audio",
    "audio/x-speex+ogg": "Ogg Speex audio",
    "audio/x-tta": "TrueAudio audio",
    "audio/x-vorbis+ogg": "Ogg Vorbis audio",
    "audio/x-wav": "WAV audio",
    "audio/x-wavpack": "WavPack audio",
    "audio/x-xm": "FastTracker II audio",

    # ── font/* ─────────────────────────────────────────────────────────────────
    "font/collection": "Font collection",
    "font/otf": "OpenType font",
    "font/ttf": "TrueType font",
    "font/woff": "WOFF font",
    "font/woff2": "WOFF2 font",

    # ── image/* ────────────────────────────────────────────────────────────────
    "image/avif": "AVIF image",
    "image/bmp": "Windows BMP image",
    "image/cgm": "Computer Graphics Metafile",
    "image/dpx": "DPX image",
    "image/emf": "EMF image",
    "image/fax-g3": "CCITT G3 fax",
    "image/fits": "FITS document",
    "image/g3fax": "G3 fax image",
    "image/gif": "GIF image",
    "image/heic": "HEIF image",
    "image/heif": "HEIF image",
    "image/ief": "IEF image",
    "image/jp2": "JPEG-2000 JP2 image",
    "image/jpeg": "JPEG image",
    "image/jpm": "JPEG-2000 JPM image",
    "image/jpx": "JPEG-2000 JPX image",
    "image/jxl": "JPEG XL image",
    "image/ktx": "Khronos texture image",
    "image/ktx2": "Khronos texture image",
    "image/openraster": "OpenRaster archiving image",
    "image/png": "PNG image",
    "image/qoi": "Quite OK Image Format",
    "image/rle": "Run Length Encoded bitmap image",
    "image/svg+xml": "SVG image",
    "image/svg+xml-compressed": "Compressed SVG image",
    "image/tiff": "TIFF image",
    "image/vnd.adobe.photoshop": "Photoshop image",
    "image/vnd.djvu": "DjVu image",
    "image/vnd.djvu+multipage": "DjVu document",
    "image/vnd.dwg": "AutoCAD image",
    "image/vnd.dxf": "DXF vector image",
    "image/vnd.microsoft.icon": "Windows icon",
    "image/vnd.ms-modi": "Microsoft Document Imaging format",
    "image/vnd.rn-realpix": "RealPix document",
    "image/vnd.wap.wbmp": "WBMP image",
    "image/vnd.zbrush.pcx": "PCX image",
    "image/webp": "WebP image",
    "image/wmf": "WMF image",
    "image/x-3ds": "3D Studio image",
    "image/x-adobe-dng": "Adobe DNG negative",
    "image/x-applix-graphics": "Applix Graphics image",
    "image/x-canon-cr2": "Canon CR2 raw image",
    "image/x-canon-cr3": "Canon CR3 raw image",
    "image/x-canon-crw": "Canon CRW raw image",
    "image/x-cmu-raster": "CMU raster image",
    "image/x-compressed-xcf": "Compressed GIMP image",
    "image/x-dds": "DirectDraw surface",
    "image/x-dib": "DIB image",
    "image/x-eps": "EPS image",
    "image/x-exr": "EXR image",
    "image/x-fuji-raf": "Fuji RAF raw image",
    "image/x-gimp-gbr": "GIMP brush",
    "image/x-gimp-gih": "GIMP brush pipe",
    "image/x-gimp-pat": "GIMP pattern",
    "image/x-icns": "MacOS X icon",
    "image/x-icon": "Windows icon",
    "image/x-ilbm": "IFF image",
    "image/x-jng": "JNG image",
    "image/x-kodak-dcr": "Kodak DCR raw image",
    "image/x-lwo": "LightWave object",
    "image/x-minolta-mrw": "Minolta MRW raw image",
    "image/x-msod": "Office drawing",
    "image/x-nikon-nef": "Nikon NEF raw image",
    "image/x-olympus-orf": "Olympus ORF raw image",
    "image/x-panasonic-rw2": "Panasonic raw image",
    "image/x-pcx": "PCX image",
    "image/x-pentax-pef": "Pentax PEF raw image",
    "image/x-photo-cd": "PCD image",
    "image/x-pict": "Macintosh Quickdraw/PICT drawing",
    "image/x-portable-anymap": "PNM image",
    "image/x-portable-bitmap": "PBM image",
    "image/x-portable-graymap": "PGM image",
    "image/x-portable-pixmap": "PPM image",
    "image/x-psd": "Photoshop image",
    "image/x-rgb": "RGB image",
    "image/x-sgi": "SGI image",
    "image/x-sony-arw": "Sony ARW raw image",
    "image/x-sun-raster": "Sun raster image",
    "image/x-tga": "TGA image",
    "image/x-win-bitmap": "Windows cursor",
    "image/x-xbitmap": "XBM image",
    "image/x-xcf": "GIMP image",
    "image/x-xcursor": "X11 cursor",
    "image/x-xfig": "XFig image",
    "image/x-xpixmap": "XPM image",
    "image/x-xwindowdump": "X window image",

    # ── inode/* ────────────────────────────────────────────────────────────────
    "inode/blockdevice": "Block device",
    "inode/chardevice": "Character device",
    "inode/directory": "Folder",
    "inode/fifo": "Pipe",
    "inode/mount-point": "Mount point",
    "inode/socket": "Socket",
    "inode/symlink": "Symbolic link",

    # ── message/* ──────────────────────────────────────────────────────────────
    "message/delivery-status": "Mail delivery report",
    "message/disposition-notification": "Mail disposition report",
    "message/external-body": "Reference to remote file",
    "message/news": "Usenet news message",
    "message/partial": "Partial email message",
    "message/rfc822": "Email message",
    "message/x-gnu-rmail": "GNU mail message",

    # ── model/* ────────────────────────────────────────────────────────────────
    "model/3mf": "3D Manufacturing Format",
    "model/gltf+json": "glTF model",
    "model/gltf-binary": "glTF binary model",
    "model/iges": "IGES document",
    "model/obj": "OBJ 3D model",
    "model/stl": "STL 3D model",
    "model/vrml": "VRML document",

    # ── multipart/* ────────────────────────────────────────────────────────────
    "multipart/alternative": "Message in several formats",
    "multipart/appledouble": "Macintosh AppleDouble-encoded file",
    "multipart/digest": "Message digest",
    "multipart/encrypted": "Encrypted message",
    "multipart/mixed": "Compound documents",
    "multipart/related": "Compound document",
    "multipart/report": "Mail system report",
    "multipart/signed": "Signed message",
    "multipart/x-mixed-replace": "Stream of data (server push)",

    # ── text/* ─────────────────────────────────────────────────────────────────
    "text/cache-manifest": "Web application cache manifest",
    "text/calendar": "VCS/ICS calendar",
    "text/css": "CSS stylesheet",
    "text/csv": "CSV document",
    "text/csv-schema": "CSV Schema document",
    "text/enriched": "Enriched text document",
    "text/html": "HTML document",
    "text/javascript": "JavaScript program",
    "text/markdown": "Markdown document",
    "text/plain": "Plain text document",
    "text/rfc822-headers": "Email headers",
    "text/richtext": "Rich text document",
    "text/rust": "Rust source code",
    "text/sgml": "SGML document",
    "text/spreadsheet": "Spreadsheet interchange document",
    "text/tab-separated-values": "TSV document",
    "text/troff": "Troff document",
    "text/turtle": "Turtle RDF document",
    "text/uri-list": "URI list",
    "text/vcard": "Electronic business card",
    "text/vnd.graphviz": "Graphviz DOT graph",
    "text/vnd.qt.linguist": "Qt translation file",
    "text/vnd.rn-realtext": "RealText document",
    "text/vnd.sun.j2me.app-descriptor": "JAD document",
    "text/vnd.trolltech.linguist": "Qt translation file",
    "text/vnd.wap.wml": "WML document",
    "text/vnd.wap.wmlscript": "WMLScript program",
    "text/vtt": "WebVTT subtitles",
    "text/x-adasrc": "Ada source code",
    "text/x-authors": "Author list",
    "text/x-bibtex": "BibTeX document",
    "text/x-c++hdr": "C++ header",
    "text/x-c++src": "C++ source code",
    "text/x-changelog": "ChangeLog document",
    "text/x-chdr": "C header",
    "text/x-cmake": "CMake source code",
    "text/x-cobol": "COBOL source file",
    "text/x-copying": "License terms",
    "text/x-crystal": "Crystal source code",
    "text/x-csharp": "C# source code",
    "text/x-csrc": "C source code",
    "text/x-dart": "Dart source code",
    "text/x-dcl": "DCL script",
    "text/x-dsrc": "D source code",
    "text/x-dtd": "DTD file",
    "text/x-eiffel": "Eiffel source code",
    "text/x-elixir": "Elixir source code",
    "text/x-emacs-lisp": "Emacs Lisp source code",
    "text/x-erlang": "Erlang source code",
    "text/x-fortran": "Fortran source code",
    "text/x-genie": "Genie source code",
    "text/x-gettext-translation": "Translation file",
    "text/x-gettext-translation-template": "Message catalog",
    "text/x-go": "Go source code",
    "text/x-gradle": "Gradle scripted build",
    "text/x-groovy": "Groovy source code",
    "text/x-haskell": "Haskell source code",
    "text/x-idl": "IDL document",
    "text/x-install": "Installation instructions",
    "text/x-java": "Java source code",
    "text/x-kotlin": "Kotlin source code",
    "text/x-ldif": "LDIF address book",
    "text/x-lilypond": "Lilypond music sheet",
    "text/x-literate-haskell": "LHS source code",
    "text/x-log": "Application log",
    "text/x-lua": "Lua script",
    "text/x-makefile": "Makefile",
    "text/x-matlab": "MATLAB script/function",
    "text/x-meson": "Meson source code",
    "text/x-moc": "Qt MOC file",
    "text/x-modelica": "Modelica model",
    "text/x-mof": "Managed Object Format",
    "text/x-nfo": "NFO document",
    "text/x-objcsrc": "Objective-C source code",
    "text/x-ocaml": "OCaml source code",
    "text/x-ocl": "OCL file",
    "text/x-opml+xml": "OPML syndication feed",
    "text/x-pascal": "Pascal source code",
    "text/x-patch": "Differences between files",
    "text/x-python": "Python script",
    "text/x-python3": "Python 3 script",
    "text/x-qml": "Qt Markup Language file",
    "text/x-readme": "README document",
    "text/x-reject": "Rejected patch",
    "text/x-rpm-spec": "RPM spec file",
    "text/x-sass": "Sass CSS pre-processor file",
    "text/x-scala": "Scala source code",
    "text/x-scheme": "Scheme source code",
    "text/x-scss": "Sass CSS pre-processor file",
    "text/x-setext": "Setext document",
    "text/x-ssa": "SSA subtitles",
    "text/x-subviewer": "SubViewer subtitles",
    "text/x-svhdr": "SystemVerilog header",
    "text/x-svsrc": "SystemVerilog source code",
    "text/x-tcl": "Tcl script",
    "text/x-tex": "TeX document",
    "text/x-texinfo": "TeXInfo document",
    "text/x-troff-me": "Troff ME input document",
    "text/x-troff-mm": "Troff MM input document",
    "text/x-troff-ms": "Troff MS input document",
    "text/x-twig": "Twig template",
    "text/x-txt2tags": "txt2tags document",
    "text/x-uuencode": "Uuencoded file",
    "text/x-vala": "Vala source code",
    "text/x-verilog": "Verilog source code",
    "text/x-vhdl": "VHDL source code",
    "text/x-xmi": "XMI file",
    "text/x-xslfo": "XSL-FO file",
    "text/xml": "XML document",

    # ── video/* ────────────────────────────────────────────────────────────────
    "video/3gpp": "3GPP multimedia file",
    "video/3gpp2": "3GPP2 multimedia file",
    "video/dv": "DV video",
    "video/isivideo": "ISI video",
    "video/mj2": "JPEG-2000 MJ2 video",
    "video/mp2t": "MPEG-2 transport stream",
    "video/mp4": "MPEG-4 video",
    "video/mpeg": "MPEG video",
    "video/ogg": "Ogg Video",
    "video/quicktime": "QuickTime video",
    "video/vnd.avi": "AVI video",
    "video/vnd.mpegurl": "M3U video playlist",
    "video/vnd.rn-realvideo": "RealVideo document",
    "video/vnd.vivo": "Vivo video",
    "video/wavelet": "Wavelet video",
    "video/webm": "WebM video",
    "video/x-anim": "ANIM animation",
    "video/x-flic": "FLIC animation",
    "video/x-flv": "Flash video",
    "video/x-javafx": "JavaFX video",
    "video/x-matroska": "Matroska video",
    "video/x-matroska-3d": "Matroska 3D video",
    "video/x-mjpeg": "MJPEG video",
    "video/x-mng": "MNG animation",
    "video/x-ms-asf": "ASF video",
    "video/x-ms-wmv": "Windows Media video",
    "video/x-msvideo": "AVI video",
    "video/x-nsv": "NullSoft video",
    "video/x-ogm+ogg": "OGM video",
    "video/x-sgi-movie": "SGI video",
    "video/x-theora+ogg": "Ogg Video",

    # ── x-content/* ────────────────────────────────────────────────────────────
    "x-content/audio-cdda": "Audio CD",
    "x-content/audio-dvd": "Audio DVD",
    "x-content/audio-player": "Portable audio player",
    "x-content/blank-bd": "Blank Blu-ray disc",
    "x-content/blank-cd": "Blank CD disc",
    "x-content/blank-dvd": "Blank DVD disc",
    "x-content/blank-hddvd": "Blank HD DVD disc",
    "x-content/ebook-reader": "E-book reader",
    "x-content/image-dcf": "Digital Photos",
    "x-content/image-picturecd": "Picture CD",
    "x-content/software": "Software",
    "x-content/unix-software": "UNIX software",
    "x-content/video-bluray": "Blu-ray video disc",
    "x-content/video-dvd": "Video DVD",
    "x-content/video-hddvd": "HD DVD video disc",
    "x-content/video-svcd": "Super Video CD",
    "x-content/video-vcd": "Video CD",
    "x-content/win32-software": "Windows software",
}
