# smwkit

A pure-Python library for reading and decoding data from Super Mario World
ROM images. It has no dependencies outside the standard library.

## Modules

- `smwkit.addr`: `AddrPc`, `AddrSnes` and `AddrVram` address types.
  `AddrPc.try_from_lorom` / `try_from_hirom` and `AddrSnes.try_from_lorom` /
  `try_from_hirom` convert between PC offsets and SNES addresses and raise
  `AddressError` for addresses that do not map. `AddrSnes` also has `bank`,
  `high`, `low`, `absolute` and the matching `with_*` methods.
- `smwkit.rom_slice`: `RomSlice`, a start address and a size, with
  `offset_forward`, `skip_forward`, `resize`, `infinite`, `contains` and more.
- `smwkit.rom`: `Rom` holds a ROM image, removing a 512-byte copier header when
  the size shows one. `Rom.slice_pc` and `Rom.slice_lorom` return the bytes of a
  `RomSlice`. Errors are `EmptyRomError`, `RomSizeError` and `SliceError`, all
  subclasses of `RomError`.
- `smwkit.internal_header`: `RomInternalHeader.parse` finds the internal header
  at the LoROM or HiROM location by its checksum/complement pair and decodes
  the name, `MapMode`, `RomType`, `RegionCode`, sizes, version and interrupt
  vectors. Failures raise `InternalHeaderParseError`.
- `smwkit.level_headers`: bit-field accessors for `PrimaryHeader`,
  `SecondaryHeader`, `SpriteHeader` and `SecondaryEntrance`, built from their
  raw bytes.
- `smwkit.layers`: `ObjectLayer.parse` and `SpriteLayer.parse` read
  `0xFF`-terminated layer data and return the layer and the number of bytes
  consumed; data without a terminator raises `LayerParseError`.
- `smwkit.gfx_file`: `TileFormat`, the `Tile.from_2bpp`, `from_3bpp`,
  `from_4bpp`, `from_8bpp` and `from_3bpp_mode7` decoders,
  `Tile.to_colors` for palette lookup, `GfxFile.from_decompressed`,
  `GFX_FILES_META` (format and location of every graphics file) and
  `tile_from_wram`.
- `smwkit.map16`: `Tile8x8` tile references and `Block`.
- `smwkit.objects`: `Object`, a level object packed into a 32-bit word, and
  `Object.parse_from_ram`.
- `smwkit.animated_tiles`: `AnimatedTileData.parse` (or `from_tables`) and
  `get_animation_frames_for_block`.
- `smwkit.object_gfx`: `ObjectGfxList`, the graphics file for each object tile
  in each tileset.
- `smwkit.tilesets`: `Tilesets.parse` reads all 0x200 Map16 blocks;
  `get_map16_tile` returns the block for a tileset, or `None` when out of range.
- `smwkit.flipbook`: `Image` and `AnimationState` for frame animations kept in
  an atlas: frame index for a progress value, texture coordinates of a frame,
  and duration for a frame rate. Invalid atlases raise subclasses of
  `AnimationError`.
- `smwkit.value_format`: `format_binary`, `format_octal`,
  `format_hexadecimal`, `parse_radix`, and `ValueSwitcher`, a number with a
  range, step methods and an optional custom text form.
- `smwkit.vram_layout`: the VRAM tile grid (`vram_tiles`, `view_extent`,
  `hovered_vram_tile`) and palette grid (`palette_row_count`,
  `hovered_palette_row`) layout and hit testing.

## Installing

```
pip install .
```

## Example

```python
from smwkit.rom import Rom
from smwkit.internal_header import RomInternalHeader
from smwkit.tilesets import Tilesets

with open("smw.sfc", "rb") as fh:
    rom = Rom(fh.read())

header = RomInternalHeader.parse(rom)
print(header.internal_rom_name, header.map_mode, header.region_code)
print(header.rom_size_in_kb(), "KB ROM")

tilesets = Tilesets.parse(rom)
block = tilesets.get_map16_tile(0x130, 0)
print(block.upper_left.tile_number())
```

## What it does not do

- It does not decompress data. Graphics files are stored compressed in the
  ROM; `GfxFile.from_decompressed` expects data that has already been
  decompressed.
- It does not follow the level pointer tables to load whole levels, and it
  does not read colour palettes. Headers and layers are decoded from bytes you
  pass in.
- It draws nothing. The flipbook, value switcher and VRAM/palette layout
  modules compute frames, text and grid positions; showing them is left to
  the caller.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```