"""
gostty - Bundled Animation Asset
================================
Copyright (c) 2026 gostty contributors

The animation ships inside the package as JSON text so that nothing is read
from the filesystem at runtime. The document is a list of frames; each frame
is a list of 41 lines, 77 visible columns wide, where ``<c>...</c>`` marks
the spans painted in the highlight color.
"""

ANIMATION_JSON = r'''
[
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|       oooo               <c>~~~~</c>               oooo               <c>~~~~</c>       |",
    "|      o    o             <c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>      |",
    "|     o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>     |",
    "|    o        o         <c>~</c>        <c>~</c>         o        o         <c>~</c>        <c>~</c>    |",
    "|                                                                           |",
    "|   o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>   |",
    "|                                                                           |",
    "|  o            o     <c>~</c>            <c>~</c>     o            o     <c>~</c>            <c>~</c>  |",
    "|                                                                           |",
    "| o              o   <c>~</c>              <c>~</c>   o              o   <c>~</c>              <c>~</c> |",
    "|                                                                           |",
    "|o                o <c>~</c>                <c>~</c> o                o <c>~</c>                <c>~</c>|",
    "|                                                                           |",
    "|   .   .   .   .  <c>~</c>.   .   .   .   . <c>~</c> .   .   .   .   .<c>~</c>  .   .   .   .   |",
    "|                                                                           |",
    "|<c>~</c>                <c>~</c> o                o <c>~</c>                <c>~</c> o                o|",
    "|                                                                           |",
    "| <c>~</c>              <c>~</c>   o              o   <c>~</c>              <c>~</c>   o              o |",
    "|                                                                           |",
    "|  <c>~</c>            <c>~</c>     o            o     <c>~</c>            <c>~</c>     o            o  |",
    "|                                                                           |",
    "|   <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o   |",
    "|                                                                           |",
    "|    <c>~</c>        <c>~</c>         o        o         <c>~</c>        <c>~</c>         o        o    |",
    "|     <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o     |",
    "|      <c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>             o    o      |",
    "|       <c>~~~~</c>               oooo               <c>~~~~</c>               oooo       |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|      ooo                <c>~~~</c>                ooo                <c>~~~</c>         |",
    "|     o   oo             <c>~</c>   <c>~~</c>             o   oo             <c>~</c>   <c>~~</c>       |",
    "|    o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>      |",
    "|   o                  <c>~</c>                  o                  <c>~</c>              |",
    "|            o                  <c>~</c>                  o                  <c>~</c>     |",
    "|  o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>    |",
    "| o                  <c>~</c>                  o                  <c>~</c>                |",
    "|              o                  <c>~</c>                  o                  <c>~</c>   |",
    "|o                  <c>~</c>                  o                  <c>~</c>                 |",
    "|               o                  <c>~</c>                  o                  <c>~</c>  |",
    "|                  <c>~</c>                  o                  <c>~</c>                  |",
    "|                o                  <c>~</c>                  o                  <c>~</c> |",
    "|                                                                           |",
    "|  .   .   .   .  <c>~</c>.   .   .   .   . <c>~</c> .   .   .   .   .<c>~</c>  .   .   .   .   <c>~</c>|",
    "|                                                                           |",
    "|                <c>~</c>                  o                  <c>~</c>                  o |",
    "|                  o                  <c>~</c>                  o                  |",
    "|               <c>~</c>                  o                  <c>~</c>                  o  |",
    "|<c>~</c>                  o                  <c>~</c>                  o                 |",
    "|              <c>~</c>                  o                  <c>~</c>                  o   |",
    "| <c>~</c>                  o                  <c>~</c>                  o                |",
    "|  <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o    |",
    "|            <c>~</c>                  o                  <c>~</c>                  o     |",
    "|   <c>~</c>                  o                  <c>~</c>                  o              |",
    "|    <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o      |",
    "|     <c>~</c>   <c>~~</c>             o   oo             <c>~</c>   <c>~~</c>             o   oo       |",
    "|      <c>~~~</c>                ooo                <c>~~~</c>                ooo         |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|     ooo                <c>~~~</c>                ooo                <c>~~~</c>          |",
    "|    o   oo             <c>~</c>   <c>~~</c>             o   oo             <c>~</c>   <c>~~</c>        |",
    "|   o                  <c>~</c>                  o                  <c>~</c>              |",
    "|  o       o          <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>       |",
    "| o         o        <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>      |",
    "|                                                                           |",
    "|o           o      <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>     |",
    "|                                                                           |",
    "|             o    <c>~</c>             <c>~</c>    o             o    <c>~</c>             <c>~</c>    |",
    "|                                                                           |",
    "|              o  <c>~</c>               <c>~</c>  o               o  <c>~</c>               <c>~</c>  o|",
    "|                                                                           |",
    "|               o<c>~</c>                 <c>~</c>o                 o<c>~</c>                 <c>~</c>o |",
    "| .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   . |",
    "|               <c>~</c>o                 o<c>~</c>                 <c>~</c>o                 o<c>~</c> |",
    "|                                                                           |",
    "|              <c>~</c>  o               o  <c>~</c>               <c>~</c>  o               o  <c>~</c>|",
    "|                                                                           |",
    "|             <c>~</c>    o             o    <c>~</c>             <c>~</c>    o             o    |",
    "|                                                                           |",
    "|<c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>      o           o     |",
    "|                                                                           |",
    "| <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>        o         o      |",
    "|  <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>          o       o       |",
    "|   <c>~</c>                  o                  <c>~</c>                  o              |",
    "|    <c>~</c>   <c>~~</c>             o   oo             <c>~</c>   <c>~~</c>             o   oo        |",
    "|     <c>~~~</c>                ooo                <c>~~~</c>                ooo          |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|    ooo                <c>~~~</c>                ooo                <c>~~~</c>           |",
    "|   o   o              <c>~</c>   <c>~</c>              o   o              <c>~</c>   <c>~</c>          |",
    "|  o     o            <c>~</c>     <c>~</c>            o     o            <c>~</c>     <c>~</c>         |",
    "| o       o          <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>        |",
    "|o         o        <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>       |",
    "|                                                                           |",
    "|           o      <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>      |",
    "|                                                                           |",
    "|            o    <c>~</c>             <c>~</c>    o             o    <c>~</c>             <c>~</c>    o|",
    "|                                                                           |",
    "|             o  <c>~</c>               <c>~</c>  o               o  <c>~</c>               <c>~</c>  o |",
    "|                                                                           |",
    "|              o<c>~</c>                 <c>~</c>o                 o<c>~</c>                 <c>~</c>o  |",
    "|.   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .  |",
    "|              <c>~</c>o                 o<c>~</c>                 <c>~</c>o                 o<c>~</c>  |",
    "|                                                                           |",
    "|             <c>~</c>  o               o  <c>~</c>               <c>~</c>  o               o  <c>~</c> |",
    "|                                                                           |",
    "|            <c>~</c>    o             o    <c>~</c>             <c>~</c>    o             o    <c>~</c>|",
    "|                                                                           |",
    "|           <c>~</c>      o           o      <c>~</c>           <c>~</c>      o           o      |",
    "|                                                                           |",
    "|<c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>        o         o       |",
    "| <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>          o       o        |",
    "|  <c>~</c>     <c>~</c>            o     o            <c>~</c>     <c>~</c>            o     o         |",
    "|   <c>~</c>   <c>~</c>              o   o              <c>~</c>   <c>~</c>              o   o          |",
    "|    <c>~~~</c>                ooo                <c>~~~</c>                ooo           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|   ooo                <c>~~~</c>                ooo                <c>~~~</c>            |",
    "| oo   o             <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>   <c>~</c>           |",
    "|o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>          |",
    "|        o                  <c>~</c>                  o                  <c>~</c>         |",
    "|                  <c>~</c>                  o                  <c>~</c>                  |",
    "|         o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o|",
    "|          o                  <c>~</c>                  o                  <c>~</c>       |",
    "|                <c>~</c>                  o                  <c>~</c>                  o |",
    "|           o                  <c>~</c>                  o                  <c>~</c>      |",
    "|               <c>~</c>                  o                  <c>~</c>                  o  |",
    "|            o                  <c>~</c>                  o                  <c>~</c>     |",
    "|              <c>~</c>                  o                  <c>~</c>                  o   |",
    "|             o                  <c>~</c>                  o                  <c>~</c>    |",
    "|   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   |",
    "|             <c>~</c>                  o                  <c>~</c>                  o    |",
    "|              o                  <c>~</c>                  o                  <c>~</c>   |",
    "|            <c>~</c>                  o                  <c>~</c>                  o     |",
    "|               o                  <c>~</c>                  o                  <c>~</c>  |",
    "|           <c>~</c>                  o                  <c>~</c>                  o      |",
    "|                o                  <c>~</c>                  o                  <c>~</c> |",
    "|          <c>~</c>                  o                  <c>~</c>                  o       |",
    "|         <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>|",
    "|                  o                  <c>~</c>                  o                  |",
    "|        <c>~</c>                  o                  <c>~</c>                  o         |",
    "|<c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o          |",
    "| <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>   <c>~</c>             oo   o           |",
    "|   <c>~~~</c>                ooo                <c>~~~</c>                ooo            |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "| oooo               <c>~~~~</c>               oooo               <c>~~~~</c>             |",
    "|o    o             <c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>            |",
    "|      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           |",
    "|       o                  <c>~</c>                  o                  <c>~</c>          |",
    "|                 <c>~</c>                  o                  <c>~</c>                  o|",
    "|        o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o |",
    "|                                                                           |",
    "|         o     <c>~</c>            <c>~</c>     o            o     <c>~</c>            <c>~</c>     o  |",
    "|                                                                           |",
    "|          o   <c>~</c>              <c>~</c>   o              o   <c>~</c>              <c>~</c>   o   |",
    "|                                                                           |",
    "|           o <c>~</c>                <c>~</c> o                o <c>~</c>                <c>~</c> o    |",
    "|                                                                           |",
    "|  .   .   . <c>~</c> .   .   .   .   .<c>~</c>  .   .   .   .   <c>~</c>   .   .   .   .  <c>~</c>.   .|",
    "|                                                                           |",
    "|           <c>~</c> o                o <c>~</c>                <c>~</c> o                o <c>~</c>    |",
    "|                                                                           |",
    "|          <c>~</c>   o              o   <c>~</c>              <c>~</c>   o              o   <c>~</c>   |",
    "|                                                                           |",
    "|         <c>~</c>     o            o     <c>~</c>            <c>~</c>     o            o     <c>~</c>  |",
    "|                                                                           |",
    "|        <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c> |",
    "|                 o                  <c>~</c>                  o                  <c>~</c>|",
    "|       <c>~</c>                  o                  <c>~</c>                  o          |",
    "|      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o           |",
    "|<c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>             o    o            |",
    "| <c>~~~~</c>               oooo               <c>~~~~</c>               oooo             |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|oooo               <c>~~~~</c>               oooo               <c>~~~~</c>              |",
    "|    o             <c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>             |",
    "|     o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o|",
    "|                <c>~</c>                  o                  <c>~</c>                  o |",
    "|      o                  <c>~</c>                  o                  <c>~</c>           |",
    "|       o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o  |",
    "|                                                                           |",
    "|        o     <c>~</c>            <c>~</c>     o            o     <c>~</c>            <c>~</c>     o   |",
    "|                                                                           |",
    "|         o   <c>~</c>              <c>~</c>   o              o   <c>~</c>              <c>~</c>   o    |",
    "|                                                                           |",
    "|          o <c>~</c>                <c>~</c> o                o <c>~</c>                <c>~</c> o     |",
    "|                                                                           |",
    "| .   .   . <c>~</c> .   .   .   .   .<c>~</c>  .   .   .   .   <c>~</c>   .   .   .   .  <c>~</c>.   . |",
    "|                                                                           |",
    "|          <c>~</c> o                o <c>~</c>                <c>~</c> o                o <c>~</c>     |",
    "|                                                                           |",
    "|         <c>~</c>   o              o   <c>~</c>              <c>~</c>   o              o   <c>~</c>    |",
    "|                                                                           |",
    "|        <c>~</c>     o            o     <c>~</c>            <c>~</c>     o            o     <c>~</c>   |",
    "|                                                                           |",
    "|       <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>  |",
    "|      <c>~</c>                  o                  <c>~</c>                  o           |",
    "|                o                  <c>~</c>                  o                  <c>~</c> |",
    "|     <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>|",
    "|    <c>~</c>             o    o             <c>~</c>    <c>~</c>             o    o             |",
    "|<c>~~~~</c>               oooo               <c>~~~~</c>               oooo              |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|oo                <c>~~~</c>                ooo                <c>~~~</c>                |",
    "|  oo             <c>~</c>   <c>~~</c>             o   oo             <c>~</c>   <c>~~</c>             o|",
    "|    o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o |",
    "|               <c>~</c>                  o                  <c>~</c>                  o  |",
    "|     o        <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>        o   |",
    "|                                                                           |",
    "|      o      <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>      o    |",
    "|       o                  <c>~</c>                  o                  <c>~</c>          |",
    "|            <c>~</c>                  o                  <c>~</c>                  o     |",
    "|        o                  <c>~</c>                  o                  <c>~</c>         |",
    "|           <c>~</c>                  o                  <c>~</c>                  o      |",
    "|                                                                           |",
    "|         o<c>~</c>                 <c>~</c>o                 o<c>~</c>                 <c>~</c>o       |",
    "|.   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .  |",
    "|         <c>~</c>o                 o<c>~</c>                 <c>~</c>o                 o<c>~</c>       |",
    "|                                                                           |",
    "|           o                  <c>~</c>                  o                  <c>~</c>      |",
    "|        <c>~</c>                  o                  <c>~</c>                  o         |",
    "|            o                  <c>~</c>                  o                  <c>~</c>     |",
    "|       <c>~</c>                  o                  <c>~</c>                  o          |",
    "|      <c>~</c>      o           o      <c>~</c>           <c>~</c>      o           o      <c>~</c>    |",
    "|                                                                           |",
    "|     <c>~</c>        o         o        <c>~</c>         <c>~</c>        o         o        <c>~</c>   |",
    "|               o                  <c>~</c>                  o                  <c>~</c>  |",
    "|    <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c> |",
    "|  <c>~~</c>             o   oo             <c>~</c>   <c>~~</c>             o   oo             <c>~</c>|",
    "|<c>~~</c>                ooo                <c>~~~</c>                ooo                |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|o                <c>~~~</c>                ooo                <c>~~~</c>                o|",
    "| o              <c>~</c>   <c>~</c>              o   o              <c>~</c>   <c>~</c>              o |",
    "|  o            <c>~</c>     <c>~</c>            o     o            <c>~</c>     <c>~</c>            o  |",
    "|   o          <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>          o   |",
    "|    o        <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>        o    |",
    "|                                                                           |",
    "|     o      <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>      o     |",
    "|                                                                           |",
    "|      o    <c>~</c>             <c>~</c>    o             o    <c>~</c>             <c>~</c>    o      |",
    "|                                                                           |",
    "|       o  <c>~</c>               <c>~</c>  o               o  <c>~</c>               <c>~</c>  o       |",
    "|                                                                           |",
    "|        o<c>~</c>                 <c>~</c>o                 o<c>~</c>                 <c>~</c>o        |",
    "|   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   |",
    "|        <c>~</c>o                 o<c>~</c>                 <c>~</c>o                 o<c>~</c>        |",
    "|                                                                           |",
    "|       <c>~</c>  o               o  <c>~</c>               <c>~</c>  o               o  <c>~</c>       |",
    "|                                                                           |",
    "|      <c>~</c>    o             o    <c>~</c>             <c>~</c>    o             o    <c>~</c>      |",
    "|                                                                           |",
    "|     <c>~</c>      o           o      <c>~</c>           <c>~</c>      o           o      <c>~</c>     |",
    "|                                                                           |",
    "|    <c>~</c>        o         o        <c>~</c>         <c>~</c>        o         o        <c>~</c>    |",
    "|   <c>~</c>          o       o          <c>~</c>       <c>~</c>          o       o          <c>~</c>   |",
    "|  <c>~</c>            o     o            <c>~</c>     <c>~</c>            o     o            <c>~</c>  |",
    "| <c>~</c>              o   o              <c>~</c>   <c>~</c>              o   o              <c>~</c> |",
    "|<c>~</c>                ooo                <c>~~~</c>                ooo                <c>~</c>|",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                <c>~~~</c>                ooo                <c>~~~</c>                oo|",
    "|o             <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>   <c>~</c>             oo  |",
    "| o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o    |",
    "|  o                  <c>~</c>                  o                  <c>~</c>               |",
    "|   o        <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>        o     |",
    "|                                                                           |",
    "|    o      <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>      o      |",
    "|          <c>~</c>                  o                  <c>~</c>                  o       |",
    "|     o                  <c>~</c>                  o                  <c>~</c>            |",
    "|         <c>~</c>                  o                  <c>~</c>                  o        |",
    "|      o                  <c>~</c>                  o                  <c>~</c>           |",
    "|                                                                           |",
    "|       o<c>~</c>                 <c>~</c>o                 o<c>~</c>                 <c>~</c>o         |",
    "|  .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .|",
    "|       <c>~</c>o                 o<c>~</c>                 <c>~</c>o                 o<c>~</c>         |",
    "|                                                                           |",
    "|      <c>~</c>                  o                  <c>~</c>                  o           |",
    "|         o                  <c>~</c>                  o                  <c>~</c>        |",
    "|     <c>~</c>                  o                  <c>~</c>                  o            |",
    "|          o                  <c>~</c>                  o                  <c>~</c>       |",
    "|    <c>~</c>      o           o      <c>~</c>           <c>~</c>      o           o      <c>~</c>      |",
    "|                                                                           |",
    "|   <c>~</c>        o         o        <c>~</c>         <c>~</c>        o         o        <c>~</c>     |",
    "|  <c>~</c>                  o                  <c>~</c>                  o               |",
    "| <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>    |",
    "|<c>~</c>             oo   o             <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>  |",
    "|                ooo                <c>~~~</c>                ooo                <c>~~</c>|",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|              <c>~~~~</c>               oooo               <c>~~~~</c>               oooo|",
    "|             <c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>             o    |",
    "|o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o     |",
    "| o                  <c>~</c>                  o                  <c>~</c>                |",
    "|           <c>~</c>                  o                  <c>~</c>                  o      |",
    "|  o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o       |",
    "|                                                                           |",
    "|   o     <c>~</c>            <c>~</c>     o            o     <c>~</c>            <c>~</c>     o        |",
    "|                                                                           |",
    "|    o   <c>~</c>              <c>~</c>   o              o   <c>~</c>              <c>~</c>   o         |",
    "|                                                                           |",
    "|     o <c>~</c>                <c>~</c> o                o <c>~</c>                <c>~</c> o          |",
    "|                                                                           |",
    "| .   .<c>~</c>  .   .   .   .   <c>~</c>   .   .   .   .  <c>~</c>.   .   .   .   . <c>~</c> .   .   . |",
    "|                                                                           |",
    "|     <c>~</c> o                o <c>~</c>                <c>~</c> o                o <c>~</c>          |",
    "|                                                                           |",
    "|    <c>~</c>   o              o   <c>~</c>              <c>~</c>   o              o   <c>~</c>         |",
    "|                                                                           |",
    "|   <c>~</c>     o            o     <c>~</c>            <c>~</c>     o            o     <c>~</c>        |",
    "|                                                                           |",
    "|  <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>       |",
    "|           o                  <c>~</c>                  o                  <c>~</c>      |",
    "| <c>~</c>                  o                  <c>~</c>                  o                |",
    "|<c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>     |",
    "|             o    o             <c>~</c>    <c>~</c>             o    o             <c>~</c>    |",
    "|              oooo               <c>~~~~</c>               oooo               <c>~~~~</c>|",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|             <c>~~~~</c>               oooo               <c>~~~~</c>               oooo |",
    "|            <c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>             o    o|",
    "|           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      |",
    "|          <c>~</c>                  o                  <c>~</c>                  o       |",
    "|o                  <c>~</c>                  o                  <c>~</c>                 |",
    "| o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o        |",
    "|                                                                           |",
    "|  o     <c>~</c>            <c>~</c>     o            o     <c>~</c>            <c>~</c>     o         |",
    "|                                                                           |",
    "|   o   <c>~</c>              <c>~</c>   o              o   <c>~</c>              <c>~</c>   o          |",
    "|                                                                           |",
    "|    o <c>~</c>                <c>~</c> o                o <c>~</c>                <c>~</c> o           |",
    "|                                                                           |",
    "|.   .<c>~</c>  .   .   .   .   <c>~</c>   .   .   .   .  <c>~</c>.   .   .   .   . <c>~</c> .   .   .  |",
    "|                                                                           |",
    "|    <c>~</c> o                o <c>~</c>                <c>~</c> o                o <c>~</c>           |",
    "|                                                                           |",
    "|   <c>~</c>   o              o   <c>~</c>              <c>~</c>   o              o   <c>~</c>          |",
    "|                                                                           |",
    "|  <c>~</c>     o            o     <c>~</c>            <c>~</c>     o            o     <c>~</c>         |",
    "|                                                                           |",
    "| <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>        |",
    "|<c>~</c>                  o                  <c>~</c>                  o                 |",
    "|          o                  <c>~</c>                  o                  <c>~</c>       |",
    "|           o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      |",
    "|            o    o             <c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>|",
    "|             oooo               <c>~~~~</c>               oooo               <c>~~~~</c> |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|            <c>~~~</c>                ooo                <c>~~~</c>                ooo   |",
    "|           <c>~</c>   <c>~~</c>             o   oo             <c>~</c>   <c>~~</c>             o   oo |",
    "|          <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o|",
    "|         <c>~</c>                  o                  <c>~</c>                  o        |",
    "|                  <c>~</c>                  o                  <c>~</c>                  |",
    "|o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o         |",
    "|       <c>~</c>                  o                  <c>~</c>                  o          |",
    "| o                  <c>~</c>                  o                  <c>~</c>                |",
    "|      <c>~</c>                  o                  <c>~</c>                  o           |",
    "|  o                  <c>~</c>                  o                  <c>~</c>               |",
    "|     <c>~</c>                  o                  <c>~</c>                  o            |",
    "|   o                  <c>~</c>                  o                  <c>~</c>              |",
    "|    <c>~</c>                  o                  <c>~</c>                  o             |",
    "|   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   |",
    "|    o                  <c>~</c>                  o                  <c>~</c>             |",
    "|   <c>~</c>                  o                  <c>~</c>                  o              |",
    "|     o                  <c>~</c>                  o                  <c>~</c>            |",
    "|  <c>~</c>                  o                  <c>~</c>                  o               |",
    "|      o                  <c>~</c>                  o                  <c>~</c>           |",
    "| <c>~</c>                  o                  <c>~</c>                  o                |",
    "|       o                  <c>~</c>                  o                  <c>~</c>          |",
    "|<c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>         |",
    "|                  o                  <c>~</c>                  o                  |",
    "|         o                  <c>~</c>                  o                  <c>~</c>        |",
    "|          o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>|",
    "|           o   oo             <c>~</c>   <c>~~</c>             o   oo             <c>~</c>   <c>~~</c> |",
    "|            ooo                <c>~~~</c>                ooo                <c>~~~</c>   |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|           <c>~~~</c>                ooo                <c>~~~</c>                ooo    |",
    "|          <c>~</c>   <c>~</c>              o   o              <c>~</c>   <c>~</c>              o   o   |",
    "|         <c>~</c>     <c>~</c>            o     o            <c>~</c>     <c>~</c>            o     o  |",
    "|        <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>          o       o |",
    "|       <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>        o         o|",
    "|                                                                           |",
    "|      <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>      o           |",
    "|                                                                           |",
    "|o    <c>~</c>             <c>~</c>    o             o    <c>~</c>             <c>~</c>    o            |",
    "|                                                                           |",
    "| o  <c>~</c>               <c>~</c>  o               o  <c>~</c>               <c>~</c>  o             |",
    "|                                                                           |",
    "|  o<c>~</c>                 <c>~</c>o                 o<c>~</c>                 <c>~</c>o              |",
    "|  .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .|",
    "|  <c>~</c>o                 o<c>~</c>                 <c>~</c>o                 o<c>~</c>              |",
    "|                                                                           |",
    "| <c>~</c>  o               o  <c>~</c>               <c>~</c>  o               o  <c>~</c>             |",
    "|                                                                           |",
    "|<c>~</c>    o             o    <c>~</c>             <c>~</c>    o             o    <c>~</c>            |",
    "|                                                                           |",
    "|      o           o      <c>~</c>           <c>~</c>      o           o      <c>~</c>           |",
    "|                                                                           |",
    "|       o         o        <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>|",
    "|        o       o          <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c> |",
    "|         o     o            <c>~</c>     <c>~</c>            o     o            <c>~</c>     <c>~</c>  |",
    "|          o   o              <c>~</c>   <c>~</c>              o   o              <c>~</c>   <c>~</c>   |",
    "|           ooo                <c>~~~</c>                ooo                <c>~~~</c>    |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|          <c>~~~</c>                ooo                <c>~~~</c>                ooo     |",
    "|        <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>   <c>~</c>             oo   o    |",
    "|              <c>~</c>                  o                  <c>~</c>                  o   |",
    "|       <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>          o       o  |",
    "|      <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>        o         o |",
    "|                                                                           |",
    "|     <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>      o           o|",
    "|                                                                           |",
    "|    <c>~</c>             <c>~</c>    o             o    <c>~</c>             <c>~</c>    o             |",
    "|                                                                           |",
    "|o  <c>~</c>               <c>~</c>  o               o  <c>~</c>               <c>~</c>  o              |",
    "|                                                                           |",
    "| o<c>~</c>                 <c>~</c>o                 o<c>~</c>                 <c>~</c>o               |",
    "| .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   . |",
    "| <c>~</c>o                 o<c>~</c>                 <c>~</c>o                 o<c>~</c>               |",
    "|                                                                           |",
    "|<c>~</c>  o               o  <c>~</c>               <c>~</c>  o               o  <c>~</c>              |",
    "|                                                                           |",
    "|    o             o    <c>~</c>             <c>~</c>    o             o    <c>~</c>             |",
    "|                                                                           |",
    "|     o           o      <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>|",
    "|                                                                           |",
    "|      o         o        <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c> |",
    "|       o       o          <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>  |",
    "|              o                  <c>~</c>                  o                  <c>~</c>   |",
    "|        oo   o             <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>   <c>~</c>    |",
    "|          ooo                <c>~~~</c>                ooo                <c>~~~</c>     |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|         <c>~~~</c>                ooo                <c>~~~</c>                ooo      |",
    "|       <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>   <c>~</c>             oo   o     |",
    "|      <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o    |",
    "|              <c>~</c>                  o                  <c>~</c>                  o   |",
    "|     <c>~</c>                  o                  <c>~</c>                  o            |",
    "|    <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o  |",
    "|                <c>~</c>                  o                  <c>~</c>                  o |",
    "|   <c>~</c>                  o                  <c>~</c>                  o              |",
    "|                 <c>~</c>                  o                  <c>~</c>                  o|",
    "|  <c>~</c>                  o                  <c>~</c>                  o               |",
    "|                  <c>~</c>                  o                  <c>~</c>                  |",
    "| <c>~</c>                  o                  <c>~</c>                  o                |",
    "|                                                                           |",
    "|<c>~</c>   .   .   .   .  <c>~</c>.   .   .   .   . <c>~</c> .   .   .   .   .<c>~</c>  .   .   .   .  |",
    "|                                                                           |",
    "| o                  <c>~</c>                  o                  <c>~</c>                |",
    "|                  o                  <c>~</c>                  o                  |",
    "|  o                  <c>~</c>                  o                  <c>~</c>               |",
    "|                 o                  <c>~</c>                  o                  <c>~</c>|",
    "|   o                  <c>~</c>                  o                  <c>~</c>              |",
    "|                o                  <c>~</c>                  o                  <c>~</c> |",
    "|    o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>  |",
    "|     o                  <c>~</c>                  o                  <c>~</c>            |",
    "|              o                  <c>~</c>                  o                  <c>~</c>   |",
    "|      o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>    |",
    "|       oo   o             <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>   <c>~</c>     |",
    "|         ooo                <c>~~~</c>                ooo                <c>~~~</c>      |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|       <c>~~~~</c>               oooo               <c>~~~~</c>               oooo       |",
    "|      <c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>             o    o      |",
    "|     <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o     |",
    "|    <c>~</c>        <c>~</c>         o        o         <c>~</c>        <c>~</c>         o        o    |",
    "|                                                                           |",
    "|   <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o   |",
    "|                                                                           |",
    "|  <c>~</c>            <c>~</c>     o            o     <c>~</c>            <c>~</c>     o            o  |",
    "|                                                                           |",
    "| <c>~</c>              <c>~</c>   o              o   <c>~</c>              <c>~</c>   o              o |",
    "|                                                                           |",
    "|<c>~</c>                <c>~</c> o                o <c>~</c>                <c>~</c> o                o|",
    "|                                                                           |",
    "|   .   .   .   .  <c>~</c>.   .   .   .   . <c>~</c> .   .   .   .   .<c>~</c>  .   .   .   .   |",
    "|                                                                           |",
    "|o                o <c>~</c>                <c>~</c> o                o <c>~</c>                <c>~</c>|",
    "|                                                                           |",
    "| o              o   <c>~</c>              <c>~</c>   o              o   <c>~</c>              <c>~</c> |",
    "|                                                                           |",
    "|  o            o     <c>~</c>            <c>~</c>     o            o     <c>~</c>            <c>~</c>  |",
    "|                                                                           |",
    "|   o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>   |",
    "|                                                                           |",
    "|    o        o         <c>~</c>        <c>~</c>         o        o         <c>~</c>        <c>~</c>    |",
    "|     o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>     |",
    "|      o    o             <c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>      |",
    "|       oooo               <c>~~~~</c>               oooo               <c>~~~~</c>       |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|      <c>~~~</c>                ooo                <c>~~~</c>                ooo         |",
    "|     <c>~</c>   <c>~~</c>             o   oo             <c>~</c>   <c>~~</c>             o   oo       |",
    "|    <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o      |",
    "|   <c>~</c>                  o                  <c>~</c>                  o              |",
    "|            <c>~</c>                  o                  <c>~</c>                  o     |",
    "|  <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o    |",
    "| <c>~</c>                  o                  <c>~</c>                  o                |",
    "|              <c>~</c>                  o                  <c>~</c>                  o   |",
    "|<c>~</c>                  o                  <c>~</c>                  o                 |",
    "|               <c>~</c>                  o                  <c>~</c>                  o  |",
    "|                  o                  <c>~</c>                  o                  |",
    "|                <c>~</c>                  o                  <c>~</c>                  o |",
    "|                                                                           |",
    "|  .   .   .   .  <c>~</c>.   .   .   .   . <c>~</c> .   .   .   .   .<c>~</c>  .   .   .   .   <c>~</c>|",
    "|                                                                           |",
    "|                o                  <c>~</c>                  o                  <c>~</c> |",
    "|                  <c>~</c>                  o                  <c>~</c>                  |",
    "|               o                  <c>~</c>                  o                  <c>~</c>  |",
    "|o                  <c>~</c>                  o                  <c>~</c>                 |",
    "|              o                  <c>~</c>                  o                  <c>~</c>   |",
    "| o                  <c>~</c>                  o                  <c>~</c>                |",
    "|  o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>    |",
    "|            o                  <c>~</c>                  o                  <c>~</c>     |",
    "|   o                  <c>~</c>                  o                  <c>~</c>              |",
    "|    o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>      |",
    "|     o   oo             <c>~</c>   <c>~~</c>             o   oo             <c>~</c>   <c>~~</c>       |",
    "|      ooo                <c>~~~</c>                ooo                <c>~~~</c>         |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|     <c>~~~</c>                ooo                <c>~~~</c>                ooo          |",
    "|    <c>~</c>   <c>~~</c>             o   oo             <c>~</c>   <c>~~</c>             o   oo        |",
    "|   <c>~</c>                  o                  <c>~</c>                  o              |",
    "|  <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>          o       o       |",
    "| <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>        o         o      |",
    "|                                                                           |",
    "|<c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>      o           o     |",
    "|                                                                           |",
    "|             <c>~</c>    o             o    <c>~</c>             <c>~</c>    o             o    |",
    "|                                                                           |",
    "|              <c>~</c>  o               o  <c>~</c>               <c>~</c>  o               o  <c>~</c>|",
    "|                                                                           |",
    "|               <c>~</c>o                 o<c>~</c>                 <c>~</c>o                 o<c>~</c> |",
    "| .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   . |",
    "|               o<c>~</c>                 <c>~</c>o                 o<c>~</c>                 <c>~</c>o |",
    "|                                                                           |",
    "|              o  <c>~</c>               <c>~</c>  o               o  <c>~</c>               <c>~</c>  o|",
    "|                                                                           |",
    "|             o    <c>~</c>             <c>~</c>    o             o    <c>~</c>             <c>~</c>    |",
    "|                                                                           |",
    "|o           o      <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>     |",
    "|                                                                           |",
    "| o         o        <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>      |",
    "|  o       o          <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>       |",
    "|   o                  <c>~</c>                  o                  <c>~</c>              |",
    "|    o   oo             <c>~</c>   <c>~~</c>             o   oo             <c>~</c>   <c>~~</c>        |",
    "|     ooo                <c>~~~</c>                ooo                <c>~~~</c>          |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|    <c>~~~</c>                ooo                <c>~~~</c>                ooo           |",
    "|   <c>~</c>   <c>~</c>              o   o              <c>~</c>   <c>~</c>              o   o          |",
    "|  <c>~</c>     <c>~</c>            o     o            <c>~</c>     <c>~</c>            o     o         |",
    "| <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>          o       o        |",
    "|<c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>        o         o       |",
    "|                                                                           |",
    "|           <c>~</c>      o           o      <c>~</c>           <c>~</c>      o           o      |",
    "|                                                                           |",
    "|            <c>~</c>    o             o    <c>~</c>             <c>~</c>    o             o    <c>~</c>|",
    "|                                                                           |",
    "|             <c>~</c>  o               o  <c>~</c>               <c>~</c>  o               o  <c>~</c> |",
    "|                                                                           |",
    "|              <c>~</c>o                 o<c>~</c>                 <c>~</c>o                 o<c>~</c>  |",
    "|.   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .  |",
    "|              o<c>~</c>                 <c>~</c>o                 o<c>~</c>                 <c>~</c>o  |",
    "|                                                                           |",
    "|             o  <c>~</c>               <c>~</c>  o               o  <c>~</c>               <c>~</c>  o |",
    "|                                                                           |",
    "|            o    <c>~</c>             <c>~</c>    o             o    <c>~</c>             <c>~</c>    o|",
    "|                                                                           |",
    "|           o      <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>      |",
    "|                                                                           |",
    "|o         o        <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>       |",
    "| o       o          <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>        |",
    "|  o     o            <c>~</c>     <c>~</c>            o     o            <c>~</c>     <c>~</c>         |",
    "|   o   o              <c>~</c>   <c>~</c>              o   o              <c>~</c>   <c>~</c>          |",
    "|    ooo                <c>~~~</c>                ooo                <c>~~~</c>           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|   <c>~~~</c>                ooo                <c>~~~</c>                ooo            |",
    "| <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>   <c>~</c>             oo   o           |",
    "|<c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o          |",
    "|        <c>~</c>                  o                  <c>~</c>                  o         |",
    "|                  o                  <c>~</c>                  o                  |",
    "|         <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>|",
    "|          <c>~</c>                  o                  <c>~</c>                  o       |",
    "|                o                  <c>~</c>                  o                  <c>~</c> |",
    "|           <c>~</c>                  o                  <c>~</c>                  o      |",
    "|               o                  <c>~</c>                  o                  <c>~</c>  |",
    "|            <c>~</c>                  o                  <c>~</c>                  o     |",
    "|              o                  <c>~</c>                  o                  <c>~</c>   |",
    "|             <c>~</c>                  o                  <c>~</c>                  o    |",
    "|   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   |",
    "|             o                  <c>~</c>                  o                  <c>~</c>    |",
    "|              <c>~</c>                  o                  <c>~</c>                  o   |",
    "|            o                  <c>~</c>                  o                  <c>~</c>     |",
    "|               <c>~</c>                  o                  <c>~</c>                  o  |",
    "|           o                  <c>~</c>                  o                  <c>~</c>      |",
    "|                <c>~</c>                  o                  <c>~</c>                  o |",
    "|          o                  <c>~</c>                  o                  <c>~</c>       |",
    "|         o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o|",
    "|                  <c>~</c>                  o                  <c>~</c>                  |",
    "|        o                  <c>~</c>                  o                  <c>~</c>         |",
    "|o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>          |",
    "| oo   o             <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>   <c>~</c>           |",
    "|   ooo                <c>~~~</c>                ooo                <c>~~~</c>            |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "| <c>~~~~</c>               oooo               <c>~~~~</c>               oooo             |",
    "|<c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>             o    o            |",
    "|      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o           |",
    "|       <c>~</c>                  o                  <c>~</c>                  o          |",
    "|                 o                  <c>~</c>                  o                  <c>~</c>|",
    "|        <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c> |",
    "|                                                                           |",
    "|         <c>~</c>     o            o     <c>~</c>            <c>~</c>     o            o     <c>~</c>  |",
    "|                                                                           |",
    "|          <c>~</c>   o              o   <c>~</c>              <c>~</c>   o              o   <c>~</c>   |",
    "|                                                                           |",
    "|           <c>~</c> o                o <c>~</c>                <c>~</c> o                o <c>~</c>    |",
    "|                                                                           |",
    "|  .   .   . <c>~</c> .   .   .   .   .<c>~</c>  .   .   .   .   <c>~</c>   .   .   .   .  <c>~</c>.   .|",
    "|                                                                           |",
    "|           o <c>~</c>                <c>~</c> o                o <c>~</c>                <c>~</c> o    |",
    "|                                                                           |",
    "|          o   <c>~</c>              <c>~</c>   o              o   <c>~</c>              <c>~</c>   o   |",
    "|                                                                           |",
    "|         o     <c>~</c>            <c>~</c>     o            o     <c>~</c>            <c>~</c>     o  |",
    "|                                                                           |",
    "|        o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o |",
    "|                 <c>~</c>                  o                  <c>~</c>                  o|",
    "|       o                  <c>~</c>                  o                  <c>~</c>          |",
    "|      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           |",
    "|o    o             <c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>            |",
    "| oooo               <c>~~~~</c>               oooo               <c>~~~~</c>             |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|<c>~~~~</c>               oooo               <c>~~~~</c>               oooo              |",
    "|    <c>~</c>             o    o             <c>~</c>    <c>~</c>             o    o             |",
    "|     <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>|",
    "|                o                  <c>~</c>                  o                  <c>~</c> |",
    "|      <c>~</c>                  o                  <c>~</c>                  o           |",
    "|       <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>  |",
    "|                                                                           |",
    "|        <c>~</c>     o            o     <c>~</c>            <c>~</c>     o            o     <c>~</c>   |",
    "|                                                                           |",
    "|         <c>~</c>   o              o   <c>~</c>              <c>~</c>   o              o   <c>~</c>    |",
    "|                                                                           |",
    "|          <c>~</c> o                o <c>~</c>                <c>~</c> o                o <c>~</c>     |",
    "|                                                                           |",
    "| .   .   . <c>~</c> .   .   .   .   .<c>~</c>  .   .   .   .   <c>~</c>   .   .   .   .  <c>~</c>.   . |",
    "|                                                                           |",
    "|          o <c>~</c>                <c>~</c> o                o <c>~</c>                <c>~</c> o     |",
    "|                                                                           |",
    "|         o   <c>~</c>              <c>~</c>   o              o   <c>~</c>              <c>~</c>   o    |",
    "|                                                                           |",
    "|        o     <c>~</c>            <c>~</c>     o            o     <c>~</c>            <c>~</c>     o   |",
    "|                                                                           |",
    "|       o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o  |",
    "|      o                  <c>~</c>                  o                  <c>~</c>           |",
    "|                <c>~</c>                  o                  <c>~</c>                  o |",
    "|     o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o|",
    "|    o             <c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>             |",
    "|oooo               <c>~~~~</c>               oooo               <c>~~~~</c>              |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|<c>~~</c>                ooo                <c>~~~</c>                ooo                |",
    "|  <c>~~</c>             o   oo             <c>~</c>   <c>~~</c>             o   oo             <c>~</c>|",
    "|    <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c> |",
    "|               o                  <c>~</c>                  o                  <c>~</c>  |",
    "|     <c>~</c>        o         o        <c>~</c>         <c>~</c>        o         o        <c>~</c>   |",
    "|                                                                           |",
    "|      <c>~</c>      o           o      <c>~</c>           <c>~</c>      o           o      <c>~</c>    |",
    "|       <c>~</c>                  o                  <c>~</c>                  o          |",
    "|            o                  <c>~</c>                  o                  <c>~</c>     |",
    "|        <c>~</c>                  o                  <c>~</c>                  o         |",
    "|           o                  <c>~</c>                  o                  <c>~</c>      |",
    "|                                                                           |",
    "|         <c>~</c>o                 o<c>~</c>                 <c>~</c>o                 o<c>~</c>       |",
    "|.   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .  |",
    "|         o<c>~</c>                 <c>~</c>o                 o<c>~</c>                 <c>~</c>o       |",
    "|                                                                           |",
    "|           <c>~</c>                  o                  <c>~</c>                  o      |",
    "|        o                  <c>~</c>                  o                  <c>~</c>         |",
    "|            <c>~</c>                  o                  <c>~</c>                  o     |",
    "|       o                  <c>~</c>                  o                  <c>~</c>          |",
    "|      o      <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>      o    |",
    "|                                                                           |",
    "|     o        <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>        o   |",
    "|               <c>~</c>                  o                  <c>~</c>                  o  |",
    "|    o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o |",
    "|  oo             <c>~</c>   <c>~~</c>             o   oo             <c>~</c>   <c>~~</c>             o|",
    "|oo                <c>~~~</c>                ooo                <c>~~~</c>                |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|<c>~</c>                ooo                <c>~~~</c>                ooo                <c>~</c>|",
    "| <c>~</c>              o   o              <c>~</c>   <c>~</c>              o   o              <c>~</c> |",
    "|  <c>~</c>            o     o            <c>~</c>     <c>~</c>            o     o            <c>~</c>  |",
    "|   <c>~</c>          o       o          <c>~</c>       <c>~</c>          o       o          <c>~</c>   |",
    "|    <c>~</c>        o         o        <c>~</c>         <c>~</c>        o         o        <c>~</c>    |",
    "|                                                                           |",
    "|     <c>~</c>      o           o      <c>~</c>           <c>~</c>      o           o      <c>~</c>     |",
    "|                                                                           |",
    "|      <c>~</c>    o             o    <c>~</c>             <c>~</c>    o             o    <c>~</c>      |",
    "|                                                                           |",
    "|       <c>~</c>  o               o  <c>~</c>               <c>~</c>  o               o  <c>~</c>       |",
    "|                                                                           |",
    "|        <c>~</c>o                 o<c>~</c>                 <c>~</c>o                 o<c>~</c>        |",
    "|   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   |",
    "|        o<c>~</c>                 <c>~</c>o                 o<c>~</c>                 <c>~</c>o        |",
    "|                                                                           |",
    "|       o  <c>~</c>               <c>~</c>  o               o  <c>~</c>               <c>~</c>  o       |",
    "|                                                                           |",
    "|      o    <c>~</c>             <c>~</c>    o             o    <c>~</c>             <c>~</c>    o      |",
    "|                                                                           |",
    "|     o      <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>      o     |",
    "|                                                                           |",
    "|    o        <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>        o    |",
    "|   o          <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>          o   |",
    "|  o            <c>~</c>     <c>~</c>            o     o            <c>~</c>     <c>~</c>            o  |",
    "| o              <c>~</c>   <c>~</c>              o   o              <c>~</c>   <c>~</c>              o |",
    "|o                <c>~~~</c>                ooo                <c>~~~</c>                o|",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                ooo                <c>~~~</c>                ooo                <c>~~</c>|",
    "|<c>~</c>             oo   o             <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>  |",
    "| <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>    |",
    "|  <c>~</c>                  o                  <c>~</c>                  o               |",
    "|   <c>~</c>        o         o        <c>~</c>         <c>~</c>        o         o        <c>~</c>     |",
    "|                                                                           |",
    "|    <c>~</c>      o           o      <c>~</c>           <c>~</c>      o           o      <c>~</c>      |",
    "|          o                  <c>~</c>                  o                  <c>~</c>       |",
    "|     <c>~</c>                  o                  <c>~</c>                  o            |",
    "|         o                  <c>~</c>                  o                  <c>~</c>        |",
    "|      <c>~</c>                  o                  <c>~</c>                  o           |",
    "|                                                                           |",
    "|       <c>~</c>o                 o<c>~</c>                 <c>~</c>o                 o<c>~</c>         |",
    "|  .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .|",
    "|       o<c>~</c>                 <c>~</c>o                 o<c>~</c>                 <c>~</c>o         |",
    "|                                                                           |",
    "|      o                  <c>~</c>                  o                  <c>~</c>           |",
    "|         <c>~</c>                  o                  <c>~</c>                  o        |",
    "|     o                  <c>~</c>                  o                  <c>~</c>            |",
    "|          <c>~</c>                  o                  <c>~</c>                  o       |",
    "|    o      <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>      o      |",
    "|                                                                           |",
    "|   o        <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>        o     |",
    "|  o                  <c>~</c>                  o                  <c>~</c>               |",
    "| o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o    |",
    "|o             <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>   <c>~</c>             oo  |",
    "|                <c>~~~</c>                ooo                <c>~~~</c>                oo|",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|              oooo               <c>~~~~</c>               oooo               <c>~~~~</c>|",
    "|             o    o             <c>~</c>    <c>~</c>             o    o             <c>~</c>    |",
    "|<c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>     |",
    "| <c>~</c>                  o                  <c>~</c>                  o                |",
    "|           o                  <c>~</c>                  o                  <c>~</c>      |",
    "|  <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>       |",
    "|                                                                           |",
    "|   <c>~</c>     o            o     <c>~</c>            <c>~</c>     o            o     <c>~</c>        |",
    "|                                                                           |",
    "|    <c>~</c>   o              o   <c>~</c>              <c>~</c>   o              o   <c>~</c>         |",
    "|                                                                           |",
    "|     <c>~</c> o                o <c>~</c>                <c>~</c> o                o <c>~</c>          |",
    "|                                                                           |",
    "| .   .<c>~</c>  .   .   .   .   <c>~</c>   .   .   .   .  <c>~</c>.   .   .   .   . <c>~</c> .   .   . |",
    "|                                                                           |",
    "|     o <c>~</c>                <c>~</c> o                o <c>~</c>                <c>~</c> o          |",
    "|                                                                           |",
    "|    o   <c>~</c>              <c>~</c>   o              o   <c>~</c>              <c>~</c>   o         |",
    "|                                                                           |",
    "|   o     <c>~</c>            <c>~</c>     o            o     <c>~</c>            <c>~</c>     o        |",
    "|                                                                           |",
    "|  o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o       |",
    "|           <c>~</c>                  o                  <c>~</c>                  o      |",
    "| o                  <c>~</c>                  o                  <c>~</c>                |",
    "|o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o     |",
    "|             <c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>             o    |",
    "|              <c>~~~~</c>               oooo               <c>~~~~</c>               oooo|",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|             oooo               <c>~~~~</c>               oooo               <c>~~~~</c> |",
    "|            o    o             <c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>|",
    "|           o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      |",
    "|          o                  <c>~</c>                  o                  <c>~</c>       |",
    "|<c>~</c>                  o                  <c>~</c>                  o                 |",
    "| <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>        |",
    "|                                                                           |",
    "|  <c>~</c>     o            o     <c>~</c>            <c>~</c>     o            o     <c>~</c>         |",
    "|                                                                           |",
    "|   <c>~</c>   o              o   <c>~</c>              <c>~</c>   o              o   <c>~</c>          |",
    "|                                                                           |",
    "|    <c>~</c> o                o <c>~</c>                <c>~</c> o                o <c>~</c>           |",
    "|                                                                           |",
    "|.   .<c>~</c>  .   .   .   .   <c>~</c>   .   .   .   .  <c>~</c>.   .   .   .   . <c>~</c> .   .   .  |",
    "|                                                                           |",
    "|    o <c>~</c>                <c>~</c> o                o <c>~</c>                <c>~</c> o           |",
    "|                                                                           |",
    "|   o   <c>~</c>              <c>~</c>   o              o   <c>~</c>              <c>~</c>   o          |",
    "|                                                                           |",
    "|  o     <c>~</c>            <c>~</c>     o            o     <c>~</c>            <c>~</c>     o         |",
    "|                                                                           |",
    "| o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o        |",
    "|o                  <c>~</c>                  o                  <c>~</c>                 |",
    "|          <c>~</c>                  o                  <c>~</c>                  o       |",
    "|           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      |",
    "|            <c>~</c>    <c>~</c>             o    o             <c>~</c>    <c>~</c>             o    o|",
    "|             <c>~~~~</c>               oooo               <c>~~~~</c>               oooo |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|            ooo                <c>~~~</c>                ooo                <c>~~~</c>   |",
    "|           o   oo             <c>~</c>   <c>~~</c>             o   oo             <c>~</c>   <c>~~</c> |",
    "|          o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>|",
    "|         o                  <c>~</c>                  o                  <c>~</c>        |",
    "|                  o                  <c>~</c>                  o                  |",
    "|<c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>         |",
    "|       o                  <c>~</c>                  o                  <c>~</c>          |",
    "| <c>~</c>                  o                  <c>~</c>                  o                |",
    "|      o                  <c>~</c>                  o                  <c>~</c>           |",
    "|  <c>~</c>                  o                  <c>~</c>                  o               |",
    "|     o                  <c>~</c>                  o                  <c>~</c>            |",
    "|   <c>~</c>                  o                  <c>~</c>                  o              |",
    "|    o                  <c>~</c>                  o                  <c>~</c>             |",
    "|   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   |",
    "|    <c>~</c>                  o                  <c>~</c>                  o             |",
    "|   o                  <c>~</c>                  o                  <c>~</c>              |",
    "|     <c>~</c>                  o                  <c>~</c>                  o            |",
    "|  o                  <c>~</c>                  o                  <c>~</c>               |",
    "|      <c>~</c>                  o                  <c>~</c>                  o           |",
    "| o                  <c>~</c>                  o                  <c>~</c>                |",
    "|       <c>~</c>                  o                  <c>~</c>                  o          |",
    "|o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o         |",
    "|                  <c>~</c>                  o                  <c>~</c>                  |",
    "|         <c>~</c>                  o                  <c>~</c>                  o        |",
    "|          <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o|",
    "|           <c>~</c>   <c>~~</c>             o   oo             <c>~</c>   <c>~~</c>             o   oo |",
    "|            <c>~~~</c>                ooo                <c>~~~</c>                ooo   |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|           ooo                <c>~~~</c>                ooo                <c>~~~</c>    |",
    "|          o   o              <c>~</c>   <c>~</c>              o   o              <c>~</c>   <c>~</c>   |",
    "|         o     o            <c>~</c>     <c>~</c>            o     o            <c>~</c>     <c>~</c>  |",
    "|        o       o          <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c> |",
    "|       o         o        <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>|",
    "|                                                                           |",
    "|      o           o      <c>~</c>           <c>~</c>      o           o      <c>~</c>           |",
    "|                                                                           |",
    "|<c>~</c>    o             o    <c>~</c>             <c>~</c>    o             o    <c>~</c>            |",
    "|                                                                           |",
    "| <c>~</c>  o               o  <c>~</c>               <c>~</c>  o               o  <c>~</c>             |",
    "|                                                                           |",
    "|  <c>~</c>o                 o<c>~</c>                 <c>~</c>o                 o<c>~</c>              |",
    "|  .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .|",
    "|  o<c>~</c>                 <c>~</c>o                 o<c>~</c>                 <c>~</c>o              |",
    "|                                                                           |",
    "| o  <c>~</c>               <c>~</c>  o               o  <c>~</c>               <c>~</c>  o             |",
    "|                                                                           |",
    "|o    <c>~</c>             <c>~</c>    o             o    <c>~</c>             <c>~</c>    o            |",
    "|                                                                           |",
    "|      <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>      o           |",
    "|                                                                           |",
    "|       <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>        o         o|",
    "|        <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>          o       o |",
    "|         <c>~</c>     <c>~</c>            o     o            <c>~</c>     <c>~</c>            o     o  |",
    "|          <c>~</c>   <c>~</c>              o   o              <c>~</c>   <c>~</c>              o   o   |",
    "|           <c>~~~</c>                ooo                <c>~~~</c>                ooo    |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|          ooo                <c>~~~</c>                ooo                <c>~~~</c>     |",
    "|        oo   o             <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>   <c>~</c>    |",
    "|              o                  <c>~</c>                  o                  <c>~</c>   |",
    "|       o       o          <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>  |",
    "|      o         o        <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c> |",
    "|                                                                           |",
    "|     o           o      <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>|",
    "|                                                                           |",
    "|    o             o    <c>~</c>             <c>~</c>    o             o    <c>~</c>             |",
    "|                                                                           |",
    "|<c>~</c>  o               o  <c>~</c>               <c>~</c>  o               o  <c>~</c>              |",
    "|                                                                           |",
    "| <c>~</c>o                 o<c>~</c>                 <c>~</c>o                 o<c>~</c>               |",
    "| .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   .   . |",
    "| o<c>~</c>                 <c>~</c>o                 o<c>~</c>                 <c>~</c>o               |",
    "|                                                                           |",
    "|o  <c>~</c>               <c>~</c>  o               o  <c>~</c>               <c>~</c>  o              |",
    "|                                                                           |",
    "|    <c>~</c>             <c>~</c>    o             o    <c>~</c>             <c>~</c>    o             |",
    "|                                                                           |",
    "|     <c>~</c>           <c>~</c>      o           o      <c>~</c>           <c>~</c>      o           o|",
    "|                                                                           |",
    "|      <c>~</c>         <c>~</c>        o         o        <c>~</c>         <c>~</c>        o         o |",
    "|       <c>~</c>       <c>~</c>          o       o          <c>~</c>       <c>~</c>          o       o  |",
    "|              <c>~</c>                  o                  <c>~</c>                  o   |",
    "|        <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>   <c>~</c>             oo   o    |",
    "|          <c>~~~</c>                ooo                <c>~~~</c>                ooo     |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ],
  [
    "+---------------------------------------------------------------------------+",
    "|                                                                           |",
    "|                             <c>g  o  s  t  t  y</c>                              |",
    "|                                                                           |",
    "| ========================================================================= |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|         ooo                <c>~~~</c>                ooo                <c>~~~</c>      |",
    "|       oo   o             <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>   <c>~</c>     |",
    "|      o      o           <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>    |",
    "|              o                  <c>~</c>                  o                  <c>~</c>   |",
    "|     o                  <c>~</c>                  o                  <c>~</c>            |",
    "|    o          o       <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>  |",
    "|                o                  <c>~</c>                  o                  <c>~</c> |",
    "|   o                  <c>~</c>                  o                  <c>~</c>              |",
    "|                 o                  <c>~</c>                  o                  <c>~</c>|",
    "|  o                  <c>~</c>                  o                  <c>~</c>               |",
    "|                  o                  <c>~</c>                  o                  |",
    "| o                  <c>~</c>                  o                  <c>~</c>                |",
    "|                                                                           |",
    "|<c>~</c>   .   .   .   .  <c>~</c>.   .   .   .   . <c>~</c> .   .   .   .   .<c>~</c>  .   .   .   .  |",
    "|                                                                           |",
    "| <c>~</c>                  o                  <c>~</c>                  o                |",
    "|                  <c>~</c>                  o                  <c>~</c>                  |",
    "|  <c>~</c>                  o                  <c>~</c>                  o               |",
    "|                 <c>~</c>                  o                  <c>~</c>                  o|",
    "|   <c>~</c>                  o                  <c>~</c>                  o              |",
    "|                <c>~</c>                  o                  <c>~</c>                  o |",
    "|    <c>~</c>          <c>~</c>       o          o       <c>~</c>          <c>~</c>       o          o  |",
    "|     <c>~</c>                  o                  <c>~</c>                  o            |",
    "|              <c>~</c>                  o                  <c>~</c>                  o   |",
    "|      <c>~</c>      <c>~</c>           o      o           <c>~</c>      <c>~</c>           o      o    |",
    "|       <c>~~</c>   <c>~</c>             oo   o             <c>~~</c>   <c>~</c>             oo   o     |",
    "|         <c>~~~</c>                ooo                <c>~~~</c>                ooo      |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "|                                                                           |",
    "+---------------------------------------------------------------------------+"
  ]
]
'''
